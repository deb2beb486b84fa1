from mailchimp_api.resources.base import Resource, encode_path
from mailchimp_api import types


class Root(Resource):

    def get(self, *, fields=(), exclude_fields=()) -> types.ApiRoot:
        """Details about the account the client is authorized for."""
        return self._get('/', types.ApiRoot, fields=fields, exclude_fields=exclude_fields)


class Ping(Resource):

    def get(self) -> types.ApiHealthStatus:
        return self.client.get('/ping', response_type=types.ApiHealthStatus)


class ActivityFeed(Resource):

    def chimp_chatter(self, *, count=0, offset=0) -> types.ChimpChatterFeed:
        """The latest Chimp Chatter: news about the account's lists and campaigns."""
        return self._get('/activity-feed/chimp-chatter', types.ChimpChatterFeed,
                         count=count, offset=offset)


class AuthorizedApps(Resource):

    def list(self, *, fields=(), exclude_fields=(), count=0, offset=0) -> types.AuthorizedApps:
        return self._get('/authorized-apps', types.AuthorizedApps, fields=fields,
                         exclude_fields=exclude_fields, count=count, offset=offset)

    def get(self, app_id, *, fields=(), exclude_fields=()) -> types.AuthorizedApp:
        return self._get(encode_path('authorized-apps', app_id), types.AuthorizedApp,
                         fields=fields, exclude_fields=exclude_fields)
