from mailchimp_api.resources.base import Resource, encode_path
from mailchimp_api import types


class VerifiedDomains(Resource):
    """/verified-domains"""

    def list(self) -> types.VerifiedDomains:
        return self.client.get('/verified-domains', response_type=types.VerifiedDomains)

    def create(self, verification_email: str) -> types.VerifiedDomain:
        """Start verifying the domain of `verification_email`. A code is sent to it."""
        return self.client.post(
            '/verified-domains',
            body=types.CreateVerifiedDomain(verification_email=verification_email),
            response_type=types.VerifiedDomain)

    def get(self, domain_name: str) -> types.VerifiedDomain:
        return self.client.get(encode_path('verified-domains', domain_name),
                               response_type=types.VerifiedDomain)

    def delete(self, domain_name: str):
        self.client.delete(encode_path('verified-domains', domain_name))

    def verify(self, domain_name: str, code: str) -> types.VerifiedDomain:
        return self.client.post(encode_path('verified-domains', domain_name, 'actions', 'verify'),
                                body=types.VerifyDomain(code=code),
                                response_type=types.VerifiedDomain)
