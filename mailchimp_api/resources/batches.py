from mailchimp_api.resources.base import Resource, encode_path
from mailchimp_api import types


class Batches(Resource):
    """/batches

    A batch runs many operations in the background. Poll `get` until the
    status is "finished", then download the results from `response_body_url`.
    """

    def list(self, *, fields=(), exclude_fields=(), count=0, offset=0) -> types.Batches:
        return self._get('/batches', types.Batches, fields=fields,
                         exclude_fields=exclude_fields, count=count, offset=offset)

    def create(self, operations) -> types.Batch:
        """Start a batch. `operations` is a list of `Operation`."""
        return self.client.post('/batches', body=types.CreateBatch(operations=list(operations)),
                                response_type=types.Batch)

    def get(self, batch_id: str, *, fields=(), exclude_fields=()) -> types.Batch:
        return self._get(encode_path('batches', batch_id), types.Batch,
                         fields=fields, exclude_fields=exclude_fields)

    def delete(self, batch_id: str):
        """Stop a batch. Operations which already ran are not rolled back."""
        self.client.delete(encode_path('batches', batch_id))


class BatchWebhooks(Resource):
    """/batch-webhooks: get notified when a batch finishes."""

    def list(self, *, fields=(), exclude_fields=(), count=0, offset=0) -> types.BatchWebhooks:
        return self._get('/batch-webhooks', types.BatchWebhooks, fields=fields,
                         exclude_fields=exclude_fields, count=count, offset=offset)

    def create(self, webhook: types.AddBatchWebhook) -> types.BatchWebhook:
        return self.client.post('/batch-webhooks', body=webhook, response_type=types.BatchWebhook)

    def get(self, batch_webhook_id: str, *, fields=(), exclude_fields=()) -> types.BatchWebhook:
        return self._get(encode_path('batch-webhooks', batch_webhook_id), types.BatchWebhook,
                         fields=fields, exclude_fields=exclude_fields)

    def update(self, batch_webhook_id: str, webhook: types.AddBatchWebhook) -> types.BatchWebhook:
        return self.client.patch(encode_path('batch-webhooks', batch_webhook_id),
                                 body=webhook, response_type=types.BatchWebhook)

    def delete(self, batch_webhook_id: str):
        self.client.delete(encode_path('batch-webhooks', batch_webhook_id))
