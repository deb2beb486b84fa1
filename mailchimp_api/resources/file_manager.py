from datetime import datetime
from typing import Optional

from mailchimp_api.resources.base import Resource, encode_path
from mailchimp_api import types


class FileManager(Resource):
    """/file-manager: images and files hosted by Mailchimp."""

    def list_files(
        self,
        *,
        fields=(),
        exclude_fields=(),
        count: int = 0,
        offset: int = 0,
        type: types.FileType = types.FileType.noop,
        created_by: str = '',
        before_created_at: Optional[datetime] = None,
        since_created_at: Optional[datetime] = None,
        sort_field: str = '',
        sort_dir: types.SortDir = types.SortDir.noop,
    ) -> types.FileManager:
        return self._get('/file-manager/files', types.FileManager,
                         fields=fields, exclude_fields=exclude_fields, count=count,
                         offset=offset, type=type, created_by=created_by,
                         before_created_at=before_created_at, since_created_at=since_created_at,
                         sort_field=sort_field, sort_dir=sort_dir)

    def upload_file(self, upload: types.UploadFile) -> types.GalleryFile:
        return self.client.post('/file-manager/files', body=upload,
                                response_type=types.GalleryFile)

    def get_file(self, file_id, *, fields=(), exclude_fields=()) -> types.GalleryFile:
        return self._get(encode_path('file-manager', 'files', file_id), types.GalleryFile,
                         fields=fields, exclude_fields=exclude_fields)

    def update_file(self, file_id, update: types.UpdateFile) -> types.GalleryFile:
        return self.client.patch(encode_path('file-manager', 'files', file_id),
                                 body=update, response_type=types.GalleryFile)

    def delete_file(self, file_id):
        self.client.delete(encode_path('file-manager', 'files', file_id))

    def list_folders(self, *, fields=(), exclude_fields=(), count=0, offset=0,
                     created_by: str = '', before_created_at: Optional[datetime] = None,
                     since_created_at: Optional[datetime] = None) -> types.FileManagerFolders:
        return self._get('/file-manager/folders', types.FileManagerFolders,
                         fields=fields, exclude_fields=exclude_fields, count=count,
                         offset=offset, created_by=created_by,
                         before_created_at=before_created_at, since_created_at=since_created_at)

    def create_folder(self, name: str) -> types.FileManagerFolder:
        return self.client.post('/file-manager/folders',
                                body=types.CreateFileManagerFolder(name=name),
                                response_type=types.FileManagerFolder)

    def get_folder(self, folder_id, *, fields=(), exclude_fields=()) -> types.FileManagerFolder:
        return self._get(encode_path('file-manager', 'folders', folder_id),
                         types.FileManagerFolder, fields=fields, exclude_fields=exclude_fields)

    def update_folder(self, folder_id, name: str) -> types.FileManagerFolder:
        return self.client.patch(encode_path('file-manager', 'folders', folder_id),
                                 body=types.CreateFileManagerFolder(name=name),
                                 response_type=types.FileManagerFolder)

    def delete_folder(self, folder_id):
        self.client.delete(encode_path('file-manager', 'folders', folder_id))
