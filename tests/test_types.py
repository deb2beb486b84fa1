from datetime import datetime, timezone

import pytest
from marshmallow import ValidationError

from mailchimp_api.types import (
    AccessToken, AimConditions, Campaign, CampaignPollConditions, CampaignStatus,
    CampaignType, ContentType, CreateCampaign, CreateSegment, HttpMethod, Link, Match,
    ProblemDetailDocument, Recipients, SegmentOptions, SegmentSummary, StaticSegmentConditions,
    AimOp, MemberOp, Settings)


CAMPAIGN = {
    'id': '42694e9e57',
    'web_id': 1287,
    'type': 'regular',
    'create_time': '2015-09-15T14:40:36+00:00',
    'archive_url': 'http://eepurl.com/xxxx',
    'status': 'save',
    'emails_sent': 0,
    'send_time': '',
    'content_type': 'template',
    'recipients': {
        'list_id': '57afe96172',
        'segment_text': '',
        'recipient_count': 2,
        'segment_opts': {
            'match': 'any',
            'conditions': [
                {'condition_type': 'Aim', 'field': 'aim', 'op': 'open', 'value': 'any'},
            ],
        },
    },
    'settings': {
        'subject_line': 'Your order is ready',
        'title': 'Order ready',
        'from_name': None,
        'reply_to': 'shop@example.com',
        'auto_fb_post': None,
        'folder_id': None,
    },
    'tracking': {'opens': True, 'html_clicks': True, 'text_clicks': False},
    'delivery_status': {'enabled': False},
    '_links': [
        {
            'rel': 'self',
            'href': 'https://us6.api.mailchimp.com/3.0/campaigns/42694e9e57',
            'method': 'GET',
            'targetSchema': 'https://us6.api.mailchimp.com/schema/3.0/Definitions/Campaigns/Response.json',
        },
    ],
    'a_property_from_the_future': {'x': 1},
}


def test_decode_campaign():
    campaign = Campaign.unmarshal(CAMPAIGN)

    assert campaign.id == '42694e9e57'
    assert campaign.type_ is CampaignType.regular
    assert campaign.status is CampaignStatus.save
    assert campaign.content_type is ContentType.template
    assert campaign.create_time == datetime(2015, 9, 15, 14, 40, 36, tzinfo=timezone.utc)
    assert campaign.send_time is None

    assert campaign.settings.from_name == ''
    assert campaign.settings.folder_id == ''
    assert campaign.settings.auto_fb_post == []
    assert campaign.tracking.opens is True

    assert campaign.recipients.segment_opts.match is Match.any
    assert campaign.recipients.segment_opts.conditions == [
        AimConditions(op=AimOp.open, value='any')
    ]

    assert campaign.links[0].method is HttpMethod.get
    assert campaign.links[0].target_schema.endswith('Response.json')


def test_unknown_status_falls_through():
    campaign = Campaign.unmarshal({'id': 'x', 'status': 'pigeon-post'})
    assert campaign.status is CampaignStatus.fallthrough_string


def test_create_campaign_requires_type():
    with pytest.raises(TypeError):
        CreateCampaign()

    body = CreateCampaign(
        type_=CampaignType.regular,
        recipients=Recipients(list_id='57afe96172'),
        settings=Settings(subject_line='Hi', title='Hi'),
    ).marshal()

    assert body['type'] == 'regular'
    assert body['recipients']['list_id'] == '57afe96172'
    assert 'segment_opts' not in body['recipients']
    assert 'content_type' not in body
    assert body['settings']['subject_line'] == 'Hi'
    assert 'reply_to' not in body['settings']


class TestConditions:

    def test_tagged(self):
        options = SegmentOptions.unmarshal({
            'match': 'all',
            'conditions': [
                {'condition_type': 'CampaignPoll', 'field': 'poll', 'op': 'member', 'value': 3},
                {'condition_type': 'StaticSegment', 'field': 'static_segment',
                 'op': 'static_is', 'value': 42},
            ]
        })

        poll, static = options.conditions
        assert isinstance(poll, CampaignPollConditions)
        assert poll.op is MemberOp.member
        assert poll.value == 3
        assert isinstance(static, StaticSegmentConditions)

    def test_will_handle(self):
        assert AimConditions.will_handle({'condition_type': 'Aim', 'field': 'aim'})
        assert not AimConditions.will_handle({'condition_type': 'CampaignPoll'})
        assert not AimConditions.will_handle({'field': 'aim'})
        assert not AimConditions.will_handle('Aim')

    def test_untagged(self):
        """Without a `condition_type`, the first variant which fits wins."""
        options = SegmentOptions.unmarshal({
            'conditions': [
                {'field': 'aim', 'op': 'open', 'value': 'any'},
                {'field': 'poll', 'op': 'member', 'value': 3},
            ]
        })

        aim, poll = options.conditions
        assert isinstance(aim, AimConditions)
        assert isinstance(poll, CampaignPollConditions)

    def test_tagged_variant_must_fit(self):
        """A known `condition_type` with the wrong shape is an error, not a fallback."""
        with pytest.raises(ValidationError):
            SegmentOptions.unmarshal({
                'conditions': [{'condition_type': 'Aim', 'field': 'poll', 'op': 'open'}]
            })

    def test_unknown_condition_type(self):
        with pytest.raises(ValidationError):
            SegmentOptions.unmarshal({
                'conditions': [{'condition_type': 'Telepathy', 'field': 'mind', 'op': 'is'}]
            })

    def test_encode(self):
        segment = CreateSegment(
            name='Openers',
            options=SegmentSummary(
                match=Match.any,
                conditions=[AimConditions(op=AimOp.open, value='any')]
            )
        )

        assert segment.marshal() == {
            'name': 'Openers',
            'options': {
                'match': 'any',
                'conditions': [
                    {'condition_type': 'Aim', 'field': 'aim', 'op': 'open', 'value': 'any'}
                ]
            }
        }

    def test_constant_validator(self):
        with pytest.raises(ValueError):
            AimConditions(field='poll')


def test_access_token_alias():
    token = AccessToken.unmarshal({
        'access_token': '5c6ccc561059aa386da9d112215bae55',
        'expires_in': 0,
        'scope': None,
        'x_refresh_token_expires_in': 86400,
    })

    assert token.access_token == '5c6ccc561059aa386da9d112215bae55'
    assert token.refresh_token_expires_in == 86400
    assert token.scope == ''


def test_problem_detail_document():
    document = ProblemDetailDocument.unmarshal({
        'type': 'https://mailchimp.com/developer/marketing/docs/errors/',
        'title': 'Invalid Resource',
        'status': 400,
        'detail': 'The resource submitted could not be validated.',
        'instance': '2b3c6e8d-1d1c-4e8e-b5a4-3b24e8f1c6c9',
        'errors': [{'field': 'email_address', 'message': 'This value should not be blank.'}],
    })

    assert document.type_.endswith('/errors/')
    assert document.errors[0].field == 'email_address'


def test_link_encodes_target_schema():
    link = Link(rel='self', href='https://x', method=HttpMethod.get, target_schema='s')
    assert link.marshal() == {'rel': 'self', 'href': 'https://x', 'method': 'GET', 'targetSchema': 's'}
