from mailchimp_api.resources.base import Resource, encode_path
from mailchimp_api import types


class ConnectedSites(Resource):
    """/connected-sites"""

    def list(self, *, fields=(), exclude_fields=(), count=0, offset=0) -> types.ConnectedSites:
        return self._get('/connected-sites', types.ConnectedSites, fields=fields,
                         exclude_fields=exclude_fields, count=count, offset=offset)

    def create(self, site: types.CreateConnectedSite) -> types.ConnectedSite:
        return self.client.post('/connected-sites', body=site, response_type=types.ConnectedSite)

    def get(self, connected_site_id: str, *, fields=(), exclude_fields=()) -> types.ConnectedSite:
        return self._get(encode_path('connected-sites', connected_site_id), types.ConnectedSite,
                         fields=fields, exclude_fields=exclude_fields)

    def delete(self, connected_site_id: str):
        self.client.delete(encode_path('connected-sites', connected_site_id))

    def verify_script_installation(self, connected_site_id: str):
        """Raises an `APIError` if Mailchimp cannot find the script on the site."""
        self.client.post(encode_path(
            'connected-sites', connected_site_id, 'actions', 'verify-script-installation'))
