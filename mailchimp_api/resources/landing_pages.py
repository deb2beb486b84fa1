from mailchimp_api.resources.base import Resource, encode_path
from mailchimp_api import types


class LandingPages(Resource):
    """/landing-pages"""

    def list(self, *, fields=(), exclude_fields=(), count=0,
             sort_field: types.SortLandingPagesField = types.SortLandingPagesField.noop,
             sort_dir: types.SortDir = types.SortDir.noop) -> types.LandingPages:
        return self._get('/landing-pages', types.LandingPages, fields=fields,
                         exclude_fields=exclude_fields, count=count,
                         sort_field=sort_field, sort_dir=sort_dir)

    def create(self, page: types.CreateLandingPage, *,
               use_default_list: bool = False) -> types.LandingPage:
        params = {'use_default_list': 'true'} if use_default_list else None
        return self.client.post('/landing-pages', params=params, body=page,
                                response_type=types.LandingPage)

    def get(self, page_id: str, *, fields=(), exclude_fields=()) -> types.LandingPage:
        return self._get(encode_path('landing-pages', page_id), types.LandingPage,
                         fields=fields, exclude_fields=exclude_fields)

    def update(self, page_id: str, page: types.CreateLandingPage) -> types.LandingPage:
        return self.client.patch(encode_path('landing-pages', page_id),
                                 body=page, response_type=types.LandingPage)

    def delete(self, page_id: str):
        self.client.delete(encode_path('landing-pages', page_id))

    def publish(self, page_id: str):
        self.client.post(encode_path('landing-pages', page_id, 'actions', 'publish'))

    def unpublish(self, page_id: str):
        self.client.post(encode_path('landing-pages', page_id, 'actions', 'unpublish'))

    def get_content(self, page_id: str, *, fields=(), exclude_fields=()) -> types.LandingPageContent:
        return self._get(encode_path('landing-pages', page_id, 'content'),
                         types.LandingPageContent, fields=fields, exclude_fields=exclude_fields)
