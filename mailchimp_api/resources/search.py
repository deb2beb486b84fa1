from mailchimp_api.resources.base import Resource
from mailchimp_api import types


class SearchCampaigns(Resource):
    """/search-campaigns"""

    def search(self, query: str, *, fields=(), exclude_fields=(),
               snip_start: str = '', snip_end: str = '') -> types.CampaignSearchResults:
        return self._get('/search-campaigns', types.CampaignSearchResults,
                         query=query, fields=fields, exclude_fields=exclude_fields,
                         snip_start=snip_start, snip_end=snip_end)


class SearchMembers(Resource):
    """/search-members"""

    def search(self, query: str, list_id: str = '', *, fields=(),
               exclude_fields=()) -> types.MemberSearchResults:
        """Search all lists, or only `list_id`, for members matching `query`."""
        return self._get('/search-members', types.MemberSearchResults,
                         query=query, list_id=list_id, fields=fields,
                         exclude_fields=exclude_fields)
