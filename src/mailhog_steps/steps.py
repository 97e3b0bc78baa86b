"""pytest-bdd step definitions for MailHog.

Activate them from a project's conftest.py::

    pytest_plugins = ["mailhog_steps.steps"]

Every step fetches the latest message again, so a step always sees what
MailHog holds at that moment.
"""

from __future__ import annotations

import os

import pytest
from pytest_bdd import given, parsers, then, when

from .assertions import assert_contains, assert_field, follow_link
from .constants import (
    BASE_URL_ENV_VAR,
    DEFAULT_MESSAGES_ENDPOINT,
    ENDPOINT_ENV_VAR,
    HTML_BY_CONTENT_TYPE_ENV_VAR,
    TRUTHY_VALUES,
)
from .display import display_email
from .extractor import extract
from .mailhog_client import MessageStoreClient
from .models import EmailView
from .polling import wait_for_latest_message
from .transport import Navigator, SessionNavigator


@pytest.fixture
def mailhog_endpoint() -> str:
    return os.environ.get(ENDPOINT_ENV_VAR) or DEFAULT_MESSAGES_ENDPOINT


@pytest.fixture
def mailhog_html_by_content_type() -> bool:
    return os.environ.get(HTML_BY_CONTENT_TYPE_ENV_VAR, "").strip().lower() in TRUTHY_VALUES


@pytest.fixture
def mailhog_client(mailhog_endpoint: str) -> MessageStoreClient:
    return MessageStoreClient(endpoint=mailhog_endpoint)


@pytest.fixture
def mailhog_base_url() -> str:
    return os.environ.get(BASE_URL_ENV_VAR, "")


@pytest.fixture
def mailhog_navigator(mailhog_base_url: str) -> Navigator:
    return SessionNavigator(base_url=mailhog_base_url)


def last_email(client: MessageStoreClient, by_content_type: bool = False) -> EmailView:
    return extract(client.fetch_latest_message(), by_content_type=by_content_type)


@given("I wait for an email to arrive")
@when("I wait for an email to arrive")
def i_wait_for_an_email(mailhog_client: MessageStoreClient) -> None:
    wait_for_latest_message(mailhog_client)


@then("I debug last email")
def i_debug_last_email(mailhog_client: MessageStoreClient, mailhog_html_by_content_type: bool) -> None:
    display_email(last_email(mailhog_client, mailhog_html_by_content_type))


@then(parsers.parse('I should see last email {field} is "{value}"'))
def i_should_see_last_email_field_is(
    mailhog_client: MessageStoreClient,
    mailhog_html_by_content_type: bool,
    field: str,
    value: str,
) -> None:
    assert_field(last_email(mailhog_client, mailhog_html_by_content_type), field, value)


@then(parsers.parse('I should see last email contains "{content}"'))
def i_should_see_last_email_contains(
    mailhog_client: MessageStoreClient,
    mailhog_html_by_content_type: bool,
    content: str,
) -> None:
    assert_contains(last_email(mailhog_client, mailhog_html_by_content_type), content)


@then("I should see last email contains:")
def i_should_see_last_email_contains_block(
    mailhog_client: MessageStoreClient,
    mailhog_html_by_content_type: bool,
    docstring: str,
) -> None:
    assert_contains(last_email(mailhog_client, mailhog_html_by_content_type), docstring.strip())


@when(parsers.parse('I follow "{link_text}" in last email'))
@then(parsers.parse('I follow "{link_text}" in last email'))
def i_follow_in_last_email(
    mailhog_client: MessageStoreClient,
    mailhog_html_by_content_type: bool,
    mailhog_navigator: Navigator,
    link_text: str,
) -> None:
    follow_link(last_email(mailhog_client, mailhog_html_by_content_type), link_text, mailhog_navigator)
