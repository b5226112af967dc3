"""Shared BDD fixtures and step definitions for the banking domain."""

from banking.account.account import Account
from banking.account.events import (
    AccountActivated,
    AccountClosed,
    AccountOpened,
    AccountSuspended,
    FundsDeposited,
    FundsWithdrawn,
)
from pytest_bdd import given, parsers, then

# Map event name strings to classes for dynamic lookup
_EVENT_CLASSES = {
    "AccountOpened": AccountOpened,
    "AccountActivated": AccountActivated,
    "AccountSuspended": AccountSuspended,
    "FundsDeposited": FundsDeposited,
    "FundsWithdrawn": FundsWithdrawn,
    "AccountClosed": AccountClosed,
}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('an open account "{account_number}" with balance {balance}'), target_fixture="account")
def open_account(account_number, balance, capsys):
    account = Account.open(account_number, float(balance))
    account._events.clear()
    capsys.readouterr()
    return account


@given("the account is suspended")
def account_is_suspended(account, capsys):
    account.suspend()
    account._events.clear()
    capsys.readouterr()


@given("the account is closed")
def account_is_closed(account, capsys):
    account.close()
    account._events.clear()
    capsys.readouterr()


# ---------------------------------------------------------------------------
# Then steps (shared)
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the account status is "{status}"'))
def account_status_is(account, status):
    assert account.status == status


@then(parsers.cfparse("the account balance is {balance}"))
def account_balance_is(account, balance):
    assert account.balance == float(balance)


@then(parsers.cfparse('the notice is "{notice}"'))
def last_notice_is(capsys, notice):
    notices = capsys.readouterr().out.splitlines()
    assert notices, "Expected a notice but nothing was printed"
    assert notices[-1] == notice


@then("no event is raised")
def no_event_raised(account):
    assert len(account._events) == 0, f"Unexpected events: {[type(e).__name__ for e in account._events]}"


@then(parsers.cfparse("a {event_type} event is raised"))
def generic_event_raised(account, event_type):
    event_cls = _EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in account._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in account._events]}"


@then(parsers.cfparse("an {event_type} event is raised"))
def generic_event_raised_an(account, event_type):
    event_cls = _EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in account._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in account._events]}"
