"""Domain events for the Account aggregate.

Only successful operations raise events. A rejected operation prints its
notice and leaves no trace in the event stream.
"""

from protean.fields import DateTime, Float, Identifier

from banking.domain import banking


@banking.event(part_of="Account")
class AccountOpened:
    """A new account was opened with its opening balance."""

    __version__ = 1

    account_number = Identifier(required=True)
    opening_balance = Float(required=True)
    opened_at = DateTime(required=True)


@banking.event(part_of="Account")
class AccountActivated:
    """A suspended account was returned to active status."""

    __version__ = 1

    account_number = Identifier(required=True)
    activated_at = DateTime(required=True)


@banking.event(part_of="Account")
class AccountSuspended:
    """An active account was suspended, freezing its balance."""

    __version__ = 1

    account_number = Identifier(required=True)
    suspended_at = DateTime(required=True)


@banking.event(part_of="Account")
class FundsDeposited:
    """Money was paid into an active account."""

    __version__ = 1

    account_number = Identifier(required=True)
    amount = Float(required=True)
    balance = Float(required=True)
    deposited_at = DateTime(required=True)


@banking.event(part_of="Account")
class FundsWithdrawn:
    """Money was taken out of an active account."""

    __version__ = 1

    account_number = Identifier(required=True)
    amount = Float(required=True)
    balance = Float(required=True)
    withdrawn_at = DateTime(required=True)


@banking.event(part_of="Account")
class AccountClosed:
    """An account was permanently closed."""

    __version__ = 1

    account_number = Identifier(required=True)
    closed_at = DateTime(required=True)
