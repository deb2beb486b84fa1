import json
from datetime import datetime, timezone

import pytest
import responses
from responses import matchers

from mailchimp_api import Client, subscriber_hash
from mailchimp_api.client import make_session
from mailchimp_api.resources.base import encode_path, make_query
from mailchimp_api.types import (
    AddMember, CampaignStatus, CampaignType, CreateCart, CreateCartLine, CreateCustomer,
    CreateInterest, CreateInterestCategory, CreateProductVariant, CreatePromoCode, HttpMethod,
    InterestCategoryType, MemberStatus, Operation, OrderCustomer, PromoRuleTarget, PromoRuleType,
    ScheduleCampaign, SignupForm, SignupFormContent, SortDir, SortField, TagStatus, TagUpdate,
    UpdateCartLine, UpdateMemberTags, UpdatePromoRule)


HOST = 'https://us6.api.mailchimp.com/3.0'
EMAIL = 'Urist.McVankab@freddiesjokes.com'
EMAIL_HASH = '62eeb292278cc15f5817cb78f7790b08'


@pytest.fixture
def client():
    return Client.from_api_key('0123456789abcdef-us6', session=make_session(backoff_factor=0))


class TestSubscriberHash:

    def test_from_email(self):
        assert subscriber_hash(EMAIL) == EMAIL_HASH
        assert subscriber_hash(EMAIL.lower()) == EMAIL_HASH

    def test_hash_is_kept(self):
        assert subscriber_hash(EMAIL_HASH) == EMAIL_HASH

    def test_uppercase_hash_is_lowercased(self):
        assert subscriber_hash(EMAIL_HASH.upper()) == EMAIL_HASH


def test_encode_path():
    assert encode_path('lists', 'abc', 'members') == '/lists/abc/members'
    assert encode_path('verified-domains', 'a/b c') == '/verified-domains/a%2Fb%20c'
    assert encode_path('reports', 42) == '/reports/42'


class TestMakeQuery:

    def test_empty_values_are_skipped(self):
        assert make_query(
            fields=(), exclude_fields=[], count=0, offset=0, list_id='',
            since=None, status=CampaignStatus.noop, has_ecommerce_store=False,
        ) == {}

    def test_float_zero_is_skipped(self):
        assert make_query(min_rate=0.0, max_rate=0.5) == {'max_rate': 0.5}

    def test_values(self):
        query = make_query(
            fields=['campaigns.id', 'total_items'],
            count=10,
            status=CampaignStatus.sent,
            sort_dir=SortDir.desc,
            since_send_time=datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
            include_total_contacts=True,
            list_id='57afe96172',
        )

        assert query == {
            'fields': 'campaigns.id,total_items',
            'count': 10,
            'status': 'sent',
            'sort_dir': 'DESC',
            'since_send_time': '2020-01-02T03:04:05+00:00',
            'include_total_contacts': 'true',
            'list_id': '57afe96172',
        }


class TestCampaigns:

    @responses.activate
    def test_list(self, client):
        responses.add(
            responses.GET, f'{HOST}/campaigns',
            match=[matchers.query_param_matcher({
                'count': '5', 'type': 'regular', 'sort_field': 'send_time', 'sort_dir': 'DESC',
                'exclude_fields': '_links',
            })],
            json={'campaigns': [{'id': 'a', 'status': 'sent'}], 'total_items': 1})

        result = client.campaigns.list(
            count=5, type=CampaignType.regular, sort_field=SortField.send_time,
            sort_dir=SortDir.desc, exclude_fields=['_links'])

        assert result.total_items == 1
        assert result.campaigns[0].status is CampaignStatus.sent

    @responses.activate
    def test_list_all(self, client):
        responses.add(responses.GET, f'{HOST}/campaigns',
                      json={'campaigns': [{'id': 'a'}, {'id': 'b'}], 'total_items': 2})

        assert [c.id for c in client.campaigns.list_all()] == ['a', 'b']
        assert 'count=1000' in responses.calls[0].request.url

    @responses.activate
    def test_schedule(self, client):
        responses.add(responses.POST, f'{HOST}/campaigns/abc/actions/schedule', status=204)

        client.campaigns.schedule('abc', ScheduleCampaign(
            schedule_time=datetime(2030, 1, 1, 12, 15, tzinfo=timezone.utc)))

        assert json.loads(responses.calls[0].request.body) == {
            'schedule_time': '2030-01-01T12:15:00+00:00',
            'timewarp': False,
        }

    @responses.activate
    def test_replicate(self, client):
        responses.add(responses.POST, f'{HOST}/campaigns/abc/actions/replicate',
                      json={'id': 'def', 'type': 'regular'})

        assert client.campaigns.replicate('abc').id == 'def'

    @responses.activate
    def test_create_folder(self, client):
        responses.add(responses.POST, f'{HOST}/campaign-folders',
                      json={'id': 'f1', 'name': 'Newsletters', 'count': 0})

        folder = client.campaign_folders.create('Newsletters')

        assert folder.id == 'f1'
        assert json.loads(responses.calls[0].request.body) == {'name': 'Newsletters'}


class TestMembers:

    @responses.activate
    def test_get_member_by_email(self, client):
        responses.add(responses.GET, f'{HOST}/lists/57afe96172/members/{EMAIL_HASH}',
                      json={'id': EMAIL_HASH, 'email_address': EMAIL, 'status': 'subscribed'})

        member = client.lists.get_member('57afe96172', EMAIL)

        assert member.id == EMAIL_HASH
        assert member.status is MemberStatus.subscribed

    @responses.activate
    def test_add_member(self, client):
        responses.add(responses.POST, f'{HOST}/lists/57afe96172/members',
                      json={'id': EMAIL_HASH, 'email_address': EMAIL, 'status': 'subscribed'})

        client.lists.add_member('57afe96172', AddMember(
            email_address=EMAIL,
            status=MemberStatus.subscribed,
            merge_fields={'FNAME': 'Urist', 'LNAME': 'McVankab'},
        ), skip_merge_validation=True)

        request = responses.calls[0].request
        assert 'skip_merge_validation=true' in request.url
        body = json.loads(request.body)
        assert body['email_address'] == EMAIL
        assert body['status'] == 'subscribed'
        assert body['merge_fields'] == {'FNAME': 'Urist', 'LNAME': 'McVankab'}
        assert 'status_if_new' not in body
        assert 'tags' not in body

    @responses.activate
    def test_set_member(self, client):
        responses.add(responses.PUT, f'{HOST}/lists/57afe96172/members/{EMAIL_HASH}',
                      json={'id': EMAIL_HASH})

        client.lists.set_member('57afe96172', EMAIL, AddMember(
            email_address=EMAIL, status_if_new=MemberStatus.pending))

        assert json.loads(responses.calls[0].request.body)['status_if_new'] == 'pending'

    @responses.activate
    def test_update_member_tags(self, client):
        responses.add(responses.POST, f'{HOST}/lists/57afe96172/members/{EMAIL_HASH}/tags',
                      status=204)

        client.lists.update_member_tags('57afe96172', EMAIL, UpdateMemberTags(tags=[
            TagUpdate(name='vip', status=TagStatus.active),
            TagUpdate(name='churned', status=TagStatus.inactive),
        ]))

        assert json.loads(responses.calls[0].request.body) == {
            'tags': [
                {'name': 'vip', 'status': 'active'},
                {'name': 'churned', 'status': 'inactive'},
            ],
            'is_syncing': False,
        }

    @responses.activate
    def test_delete_member_permanent(self, client):
        url = f'{HOST}/lists/57afe96172/members/{EMAIL_HASH}/actions/delete-permanent'
        responses.add(responses.POST, url, status=204)

        client.lists.delete_member_permanent('57afe96172', EMAIL)
        assert responses.calls[0].request.url == url

    @responses.activate
    def test_member_notes(self, client):
        url = f'{HOST}/lists/57afe96172/members/{EMAIL_HASH}/notes/42'
        responses.add(responses.GET, url, json={'id': 42, 'note': 'Likes cats'})
        responses.add(responses.PATCH, url, json={'id': 42, 'note': 'Likes dogs'})
        responses.add(responses.DELETE, url, status=204)

        assert client.lists.get_member_note('57afe96172', EMAIL, 42).note == 'Likes cats'
        assert client.lists.update_member_note('57afe96172', EMAIL, 42, 'Likes dogs').id == 42
        assert client.lists.delete_member_note('57afe96172', EMAIL, 42) is None

        assert json.loads(responses.calls[1].request.body) == {'note': 'Likes dogs'}
        assert responses.calls[2].request.method == 'DELETE'

    @responses.activate
    def test_member_activity_feed(self, client):
        responses.add(
            responses.GET, f'{HOST}/lists/57afe96172/members/{EMAIL_HASH}/activity-feed',
            match=[matchers.query_param_matcher({'count': '5', 'activity_filters': 'open,click'})],
            json={
                'activity': [
                    {'activity_type': 'open', 'created_at_timestamp': '2021-03-01T10:00:00+00:00',
                     'campaign_id': 'c1', 'campaign_title': 'March', 'opened_from': 'web'},
                ],
                'email_id': EMAIL_HASH,
                'total_items': 1,
            })

        feed = client.lists.member_activity_feed(
            '57afe96172', EMAIL, count=5, activity_filters=['open', 'click'])

        assert feed.activity[0].activity_type == 'open'
        assert feed.activity[0].campaign_title == 'March'
        assert feed.activity[0].created_at_timestamp == datetime(2021, 3, 1, 10, tzinfo=timezone.utc)

    @responses.activate
    def test_member_events_and_goals(self, client):
        base = f'{HOST}/lists/57afe96172/members/{EMAIL_HASH}'
        responses.add(responses.GET, f'{base}/events', json={
            'events': [{'name': 'signed_up', 'properties': {'plan': 'free'}}], 'total_items': 1})
        responses.add(responses.GET, f'{base}/goals', json={
            'goals': [{'goal_id': 7, 'event': 'pricing', 'data': ''}], 'total_items': 1})

        events = client.lists.list_member_events('57afe96172', EMAIL)
        goals = client.lists.member_goals('57afe96172', EMAIL)

        assert events.events[0].properties == {'plan': 'free'}
        assert goals.goals[0].goal_id == 7


class TestLists:

    @responses.activate
    def test_growth_history_month(self, client):
        responses.add(responses.GET, f'{HOST}/lists/57afe96172/growth-history/2021-03',
                      json={'list_id': '57afe96172', 'month': '2021-03', 'subscribed': 12})

        month = client.lists.growth_history_month('57afe96172', '2021-03')
        assert month.subscribed == 12

    @responses.activate
    def test_clients_and_locations(self, client):
        responses.add(responses.GET, f'{HOST}/lists/57afe96172/clients', json={
            'clients': [{'client': 'Gmail', 'members': 120}], 'total_items': 1})
        responses.add(responses.GET, f'{HOST}/lists/57afe96172/locations', json={
            'locations': [{'country': 'Germany', 'cc': 'DE', 'percent': 12.5, 'total': 25}],
            'total_items': 1})

        assert client.lists.clients('57afe96172').clients[0].members == 120
        location = client.lists.locations('57afe96172').locations[0]
        assert location.cc == 'DE'
        assert location.percent == 12.5

    @responses.activate
    def test_abuse_reports(self, client):
        responses.add(responses.GET, f'{HOST}/lists/57afe96172/abuse-reports', json={
            'abuse_reports': [{'id': 3, 'email_address': EMAIL}], 'total_items': 1})
        responses.add(responses.GET, f'{HOST}/lists/57afe96172/abuse-reports/3',
                      json={'id': 3, 'email_address': EMAIL})

        assert client.lists.list_abuse_reports('57afe96172').abuse_reports[0].id == 3
        assert client.lists.get_abuse_report('57afe96172', 3).email_address == EMAIL

    @responses.activate
    def test_customize_signup_form(self, client):
        responses.add(responses.POST, f'{HOST}/lists/57afe96172/signup-forms', json={
            'contents': [{'section': 'signup_message', 'value': 'Join us'}],
            'signup_form_url': 'http://eepurl.com/xxxx',
        })

        form = client.lists.customize_signup_form('57afe96172', SignupForm(
            contents=[SignupFormContent(section='signup_message', value='Join us')]))

        assert form.signup_form_url == 'http://eepurl.com/xxxx'
        assert json.loads(responses.calls[0].request.body) == {
            'contents': [{'section': 'signup_message', 'value': 'Join us'}]}

    @responses.activate
    def test_interests(self, client):
        categories = f'{HOST}/lists/57afe96172/interest-categories'
        responses.add(responses.POST, categories,
                      json={'id': 'cat1', 'title': 'Topics', 'type': 'checkboxes'})
        responses.add(responses.POST, f'{categories}/cat1/interests',
                      json={'id': 'int1', 'category_id': 'cat1', 'name': 'Cheese'})
        responses.add(responses.DELETE, f'{categories}/cat1/interests/int1', status=204)

        category = client.lists.create_interest_category('57afe96172', CreateInterestCategory(
            title='Topics', type_=InterestCategoryType.checkboxes))
        interest = client.lists.create_interest('57afe96172', category.id,
                                                CreateInterest(name='Cheese'))
        client.lists.delete_interest('57afe96172', category.id, interest.id)

        assert json.loads(responses.calls[0].request.body) == {
            'title': 'Topics', 'type': 'checkboxes'}
        assert json.loads(responses.calls[1].request.body) == {'name': 'Cheese'}
        assert len(responses.calls) == 3


class TestEcommerce:

    @responses.activate
    def test_create_cart(self, client):
        responses.add(responses.POST, f'{HOST}/ecommerce/stores/s1/carts', json={
            'id': 'cart1',
            'customer': {'id': 'cust1', 'email_address': EMAIL},
            'currency_code': 'USD',
            'order_total': 19.5,
            'lines': [{'id': 'l1', 'product_id': 'p1', 'quantity': 2, 'price': 9.75}],
        })

        cart = client.ecommerce.create_cart('s1', CreateCart(
            id='cart1',
            customer=OrderCustomer(id='cust1', email_address=EMAIL, opt_in_status=False),
            currency_code='USD',
            order_total=19.5,
            lines=[CreateCartLine(id='l1', product_id='p1', product_variant_id='p1',
                                  quantity=2, price=9.75)],
        ))

        assert cart.customer.email_address == EMAIL
        assert cart.lines[0].quantity == 2
        assert json.loads(responses.calls[0].request.body) == {
            'id': 'cart1',
            'customer': {'id': 'cust1', 'email_address': EMAIL, 'opt_in_status': False},
            'currency_code': 'USD',
            'order_total': 19.5,
            'lines': [{'id': 'l1', 'product_id': 'p1', 'product_variant_id': 'p1',
                       'quantity': 2, 'price': 9.75}],
        }

    @responses.activate
    def test_update_sends_only_what_is_set(self, client):
        responses.add(responses.PATCH, f'{HOST}/ecommerce/stores/s1/carts/cart1/lines/l1',
                      json={'id': 'l1', 'quantity': 0})

        client.ecommerce.update_cart_line('s1', 'cart1', 'l1', UpdateCartLine(quantity=0))

        assert json.loads(responses.calls[0].request.body) == {'quantity': 0}

    @responses.activate
    def test_set_customer(self, client):
        responses.add(responses.PUT, f'{HOST}/ecommerce/stores/s1/customers/cust1',
                      json={'id': 'cust1', 'email_address': EMAIL, 'opt_in_status': True})

        customer = client.ecommerce.set_customer('s1', 'cust1', CreateCustomer(
            id='cust1', email_address=EMAIL, opt_in_status=True))

        assert customer.opt_in_status is True

    @responses.activate
    def test_promo_rules_and_codes(self, client):
        rules = f'{HOST}/ecommerce/stores/s1/promo-rules'
        responses.add(responses.PATCH, f'{rules}/r1', json={
            'id': 'r1', 'amount': 0.1, 'type': 'percentage', 'target': 'total'})
        responses.add(responses.POST, f'{rules}/r1/promo-codes', json={
            'id': 'code1', 'code': 'SPRING10', 'usage_count': 0})

        rule = client.ecommerce.update_promo_rule('s1', 'r1', UpdatePromoRule(enabled=False))
        code = client.ecommerce.create_promo_code('s1', 'r1', CreatePromoCode(
            id='code1', code='SPRING10', redemption_url='https://example.com/spring'))

        assert rule.type_ is PromoRuleType.percentage
        assert rule.target is PromoRuleTarget.total
        assert code.code == 'SPRING10'
        assert json.loads(responses.calls[0].request.body) == {'enabled': False}
        assert json.loads(responses.calls[1].request.body) == {
            'id': 'code1', 'code': 'SPRING10', 'redemption_url': 'https://example.com/spring'}

    @responses.activate
    def test_product_variants_and_images(self, client):
        product = f'{HOST}/ecommerce/stores/s1/products/p1'
        responses.add(responses.PUT, f'{product}/variants/v1',
                      json={'id': 'v1', 'title': 'Blue', 'price': 12.0})
        responses.add(responses.DELETE, f'{product}/images/i1', status=204)

        variant = client.ecommerce.set_product_variant('s1', 'p1', 'v1', CreateProductVariant(
            id='v1', title='Blue', price=12.0))
        client.ecommerce.delete_product_image('s1', 'p1', 'i1')

        assert variant.price == 12.0
        assert json.loads(responses.calls[0].request.body) == {
            'id': 'v1', 'title': 'Blue', 'price': 12.0}
        assert responses.calls[1].request.method == 'DELETE'

    @responses.activate
    def test_list_order_lines(self, client):
        responses.add(
            responses.GET, f'{HOST}/ecommerce/stores/s1/orders/o1/lines',
            match=[matchers.query_param_matcher({'count': '50', 'offset': '50'})],
            json={'store_id': 's1', 'order_id': 'o1',
                  'lines': [{'id': 'l1', 'price': 3.5}], 'total_items': 51})

        lines = client.ecommerce.list_order_lines('s1', 'o1', count=50, offset=50)

        assert lines.order_id == 'o1'
        assert lines.lines[0].price == 3.5


class TestBatches:

    @responses.activate
    def test_create(self, client):
        responses.add(responses.POST, f'{HOST}/batches',
                      json={'id': '123abc', 'status': 'pending', 'total_operations': 1})

        batch = client.batches.create([
            Operation(method=HttpMethod.get, path='/lists/57afe96172/members',
                      params={'count': 10}, operation_id='members'),
        ])

        assert batch.id == '123abc'
        assert json.loads(responses.calls[0].request.body) == {
            'operations': [{
                'method': 'GET',
                'path': '/lists/57afe96172/members',
                'params': {'count': 10},
                'operation_id': 'members',
            }]
        }


class TestOther:

    @responses.activate
    def test_root(self, client):
        responses.add(responses.GET, f'{HOST}/', json={
            'account_id': '8d3a3db4d97663a9074efcc16', 'account_name': 'Freddie\'s Jokes'})

        assert client.root.get().account_name == "Freddie's Jokes"

    @responses.activate
    def test_report(self, client):
        responses.add(responses.GET, f'{HOST}/reports/42694e9e57', json={
            'id': '42694e9e57',
            'type': 'regular',
            'emails_sent': 200,
            'opens': {'opens_total': 80, 'unique_opens': 60, 'open_rate': 0.3,
                      'last_open': '2020-01-02T03:04:05+00:00'},
            'bounces': {'hard_bounces': 1, 'soft_bounces': 2, 'syntax_errors': 0},
        })

        report = client.reports.get('42694e9e57')

        assert report.type_ is CampaignType.regular
        assert report.opens.open_rate == 0.3
        assert report.bounces.soft_bounces == 2

    @responses.activate
    def test_search_members(self, client):
        responses.add(
            responses.GET, f'{HOST}/search-members',
            match=[matchers.query_param_matcher({'query': EMAIL})],
            json={'exact_matches': {'members': [{'email_address': EMAIL}], 'total_items': 1},
                  'full_search': {'members': [], 'total_items': 0}})

        result = client.search_members.search(EMAIL)

        assert result.exact_matches.members[0].email_address == EMAIL
        assert result.full_search.total_items == 0

    @responses.activate
    def test_verify_domain(self, client):
        responses.add(responses.POST, f'{HOST}/verified-domains/example.com/actions/verify',
                      json={'domain': 'example.com', 'verified': True})

        domain = client.verified_domains.verify('example.com', 'abc123')

        assert domain.verified is True
        assert json.loads(responses.calls[0].request.body) == {'code': 'abc123'}

    @responses.activate
    def test_ecommerce_orders(self, client):
        responses.add(responses.GET, f'{HOST}/ecommerce/orders',
                      json={'orders': [{'id': 'o1', 'store_id': 's1'}], 'total_items': 1})
        responses.add(responses.GET, f'{HOST}/ecommerce/stores/s1/orders',
                      json={'orders': [{'id': 'o1', 'store_id': 's1'}], 'total_items': 1})

        assert client.ecommerce.list_orders().orders[0].id == 'o1'
        assert client.ecommerce.list_store_orders('s1').orders[0].store_id == 's1'

    @responses.activate
    def test_landing_page_publish(self, client):
        responses.add(responses.POST, f'{HOST}/landing-pages/p1/actions/publish', status=204)
        assert client.landing_pages.publish('p1') is None

    @responses.activate
    def test_chimp_chatter(self, client):
        responses.add(responses.GET, f'{HOST}/activity-feed/chimp-chatter', json={
            'chimp_chatter': [{'title': 'New subscriber', 'type': 'lists:new-subscriber'}],
            'total_items': 1,
        })

        feed = client.activity_feed.chimp_chatter()
        assert feed.chimp_chatter[0].title == 'New subscriber'
