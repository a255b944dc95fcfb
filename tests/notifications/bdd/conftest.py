"""Shared BDD fixtures and step definitions for notification dispatch."""

import asyncio

import pytest
from pytest_bdd import parsers, then


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def built():
    """Container for the record built in a scenario."""
    return {"record": None}


# ---------------------------------------------------------------------------
# Then steps: built notifications
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the notification priority is "{priority}"'))
def priority_is(built, priority):
    assert built["record"].priority == priority


@then(parsers.cfparse('the notification title is "{title}"'))
def title_is(built, title):
    assert built["record"].title == title


@then(parsers.cfparse('the notification body mentions "{text}"'))
def body_mentions(built, text):
    assert text in built["record"].body


@then(parsers.cfparse('the build fails naming "{field}"'))
def build_fails(error, field):
    assert error["exc"] is not None
    assert field in error["exc"].messages


# ---------------------------------------------------------------------------
# Then steps: mailboxes
# ---------------------------------------------------------------------------
@then(parsers.re(r'"(?P<recipient_id>[^"]+)" has (?P<count>\d+) unread notifications?'))
def unread_count_is(mailbox, recipient_id, count):
    assert asyncio.run(mailbox.unread_count(recipient_id)) == int(count)


@then(parsers.cfparse('the latest notification for "{recipient_id}" is titled "{title}"'))
def latest_title_is(mailbox, recipient_id, title):
    records = asyncio.run(mailbox.list_for_recipient(recipient_id))
    assert records, f"No notifications for {recipient_id}"
    assert records[0].title == title
