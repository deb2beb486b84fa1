from datetime import datetime
from typing import Optional

from mailchimp_api.resources.base import Resource, encode_path
from mailchimp_api import types


class Templates(Resource):
    """/templates"""

    def list(
        self,
        *,
        fields=(),
        exclude_fields=(),
        count: int = 0,
        offset: int = 0,
        created_by: str = '',
        since_date_created: Optional[datetime] = None,
        before_date_created: Optional[datetime] = None,
        type: str = '',
        category: str = '',
        folder_id: str = '',
        sort_field: types.SortTemplatesField = types.SortTemplatesField.noop,
        sort_dir: types.SortDir = types.SortDir.noop,
    ) -> types.Templates:
        return self._get(
            '/templates', types.Templates,
            fields=fields, exclude_fields=exclude_fields, count=count, offset=offset,
            created_by=created_by, since_date_created=since_date_created,
            before_date_created=before_date_created, type=type, category=category,
            folder_id=folder_id, sort_field=sort_field, sort_dir=sort_dir,
        )

    def create(self, template: types.CreateTemplate) -> types.Template:
        return self.client.post('/templates', body=template, response_type=types.Template)

    def get(self, template_id, *, fields=(), exclude_fields=()) -> types.Template:
        return self._get(encode_path('templates', template_id), types.Template,
                         fields=fields, exclude_fields=exclude_fields)

    def update(self, template_id, template: types.CreateTemplate) -> types.Template:
        return self.client.patch(encode_path('templates', template_id),
                                 body=template, response_type=types.Template)

    def delete(self, template_id):
        self.client.delete(encode_path('templates', template_id))

    def default_content(self, template_id, *, fields=(),
                        exclude_fields=()) -> types.TemplateDefaultContent:
        return self._get(encode_path('templates', template_id, 'default-content'),
                         types.TemplateDefaultContent,
                         fields=fields, exclude_fields=exclude_fields)


class TemplateFolders(Resource):
    """/template-folders"""

    def list(self, *, fields=(), exclude_fields=(), count=0, offset=0) -> types.TemplateFolders:
        return self._get('/template-folders', types.TemplateFolders, fields=fields,
                         exclude_fields=exclude_fields, count=count, offset=offset)

    def create(self, name: str) -> types.TemplateFolder:
        return self.client.post('/template-folders', body=types.GalleryFolder(name=name),
                                response_type=types.TemplateFolder)

    def get(self, folder_id: str, *, fields=(), exclude_fields=()) -> types.TemplateFolder:
        return self._get(encode_path('template-folders', folder_id), types.TemplateFolder,
                         fields=fields, exclude_fields=exclude_fields)

    def update(self, folder_id: str, name: str) -> types.TemplateFolder:
        return self.client.patch(encode_path('template-folders', folder_id),
                                 body=types.GalleryFolder(name=name),
                                 response_type=types.TemplateFolder)

    def delete(self, folder_id: str):
        self.client.delete(encode_path('template-folders', folder_id))
