"""
core/inventory/services/messaging.py - Messaging 리소스 수집

SQS Queue 수집.
"""

from __future__ import annotations

from typing import Any

from core.region import Region

from ..normalize import epoch_timestamp, text
from ..policy import FAIL_FAST
from ..provider import ResourceKind, ResourceProvider, paginate

QUEUE_ATTRIBUTES = ["VisibilityTimeout", "ApproximateNumberOfMessages", "CreatedTimestamp", "QueueArn"]


def queue_name_from_url(url: str) -> str:
    """Queue URL의 마지막 경로 → 큐 이름"""
    return url.rstrip("/").rsplit("/", 1)[-1]


class QueueProvider(ResourceProvider):
    """SQS 큐 (list_queues → get_queue_attributes, 요약은 Queue URL)"""

    service = "sqs"
    list_operation = "list_queues"
    describe_operation = "get_queue_attributes"

    def list_summaries(self, client: Any, region: Region) -> list[str]:
        return paginate(client, "list_queues", "QueueUrls")

    def describe_detail(self, client: Any, region: Region, summary: str) -> dict:
        response = client.get_queue_attributes(QueueUrl=summary, AttributeNames=QUEUE_ATTRIBUTES)
        return response.get("Attributes", {})


def normalize_queue(region: Region, url: str, detail: dict | None) -> tuple[str, ...]:
    attributes = detail or {}
    return (
        queue_name_from_url(text(url)),
        region.name,
        text(attributes.get("VisibilityTimeout")),
        text(attributes.get("ApproximateNumberOfMessages")),
        epoch_timestamp(attributes.get("CreatedTimestamp")),
        text(attributes.get("QueueArn")),
    )


SQS = ResourceKind(
    name="sqs",
    title="SQS Queues",
    headers=("Queue Name", "Region", "Visibility Timeout", "Approximate Messages", "Created Timestamp", "Arn"),
    provider=QueueProvider,
    normalize=normalize_queue,
    policy=FAIL_FAST,
)
