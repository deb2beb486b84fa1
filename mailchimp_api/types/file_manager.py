"""Files and folders in the File Manager."""

from datetime import datetime
from typing import List, Optional

from mailchimp_api.models import model, ApiEnum, Factory
from mailchimp_api.types.common import Link, Links


class FileType(ApiEnum):
    image = 'image'
    file = 'file'
    noop = ''
    fallthrough_string = '*'


@model
class GalleryFile:
    """GET /file-manager/files/{file_id}"""
    id: int = 0
    folder_id: int = 0
    type_: FileType = FileType.noop
    name: str = ''
    full_size_url: str = ''
    thumbnail_url: str = ''
    size: int = 0
    created_at: Optional[datetime] = None
    created_by: str = ''
    width: int = 0
    height: int = 0
    links: List[Link] = Links()


@model
class FileManager:
    """GET /file-manager/files"""
    files: List[GalleryFile] = Factory(list)
    total_file_size: float = 0.0
    total_items: int = 0
    links: List[Link] = Links()


@model
class UploadFile:
    """The body for POST /file-manager/files.

    `file_data` is the base64-encoded content of the file.
    """
    name: str
    file_data: str
    folder_id: int = 0


@model
class UpdateFile:
    name: str = ''
    folder_id: Optional[int] = None


@model
class FileManagerFolder:
    id: int = 0
    name: str = ''
    file_count: int = 0
    created_at: Optional[datetime] = None
    created_by: str = ''
    links: List[Link] = Links()


@model
class FileManagerFolders:
    """GET /file-manager/folders"""
    folders: List[FileManagerFolder] = Factory(list)
    total_items: int = 0
    links: List[Link] = Links()


@model
class CreateFileManagerFolder:
    name: str
