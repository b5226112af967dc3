"""Account aggregate root.

An Account holds an account number, a balance and a status. The status drives
a small state machine:

    Active    -> Suspended (suspend)
    Suspended -> Active    (activate)
    Active    -> Closed    (close)
    Suspended -> Closed    (close)

Closed is terminal. The balance only moves while the account is Active.

Every operation prints exactly one notice line to standard output, whether it
took effect or was refused. A refusal is an ordinary outcome: nothing is
raised, the notice explains what happened and the aggregate is left untouched.
Successful operations additionally raise a domain event.
"""

from datetime import UTC, datetime
from enum import Enum

import structlog
from protean.fields import Float, Identifier, String

from banking.account.events import (
    AccountActivated,
    AccountClosed,
    AccountOpened,
    AccountSuspended,
    FundsDeposited,
    FundsWithdrawn,
)
from banking.domain import banking

logger = structlog.get_logger(__name__)


class AccountStatus(Enum):
    """Enumeration of account statuses."""

    ACTIVE = "Active"
    SUSPENDED = "Suspended"
    CLOSED = "Closed"


# Notice printed when an operation is refused in a given status.
# Pairs missing from this table are allowed to proceed.
_REFUSALS = {
    ("activate", AccountStatus.ACTIVE): "Account is already activated!",
    ("activate", AccountStatus.CLOSED): "You cannot activate a closed account!",
    ("suspend", AccountStatus.SUSPENDED): "Account is already suspended!",
    ("suspend", AccountStatus.CLOSED): "You cannot suspend a closed account!",
    ("deposit", AccountStatus.SUSPENDED): "You cannot deposit on a suspended account!",
    ("deposit", AccountStatus.CLOSED): "You cannot deposit on a closed account!",
    ("withdraw", AccountStatus.SUSPENDED): "You cannot withdraw on a suspended account!",
    ("withdraw", AccountStatus.CLOSED): "You cannot withdraw on a closed account!",
    ("close", AccountStatus.CLOSED): "Account is closed!",
}


@banking.aggregate
class Account:
    """A bank account identified by its account number.

    Amounts are not validated: withdrawing more than the balance, or passing a
    negative amount, is applied as given.
    """

    account_number = Identifier(identifier=True, required=True)
    balance = Float(default=0.0)
    status = String(
        max_length=15,
        choices=AccountStatus,
        default=AccountStatus.ACTIVE.value,
    )

    @classmethod
    def open(cls, account_number: str, opening_balance: float = 0.0):
        """Open a new Active account holding ``opening_balance``."""
        account = cls(account_number=account_number, balance=opening_balance)
        account.raise_(
            AccountOpened(
                account_number=account_number,
                opening_balance=opening_balance,
                opened_at=datetime.now(UTC),
            )
        )
        logger.debug("account_opened", account_number=account_number, balance=opening_balance)
        return account

    # -------------------------------------------------------------------
    # Notices
    # -------------------------------------------------------------------
    def _announce(self, notice: str) -> None:
        logger.debug("account_notice", account_number=str(self.account_number), notice=notice)
        print(notice)

    def _refused(self, operation: str) -> bool:
        """Announce the refusal and return True when ``operation`` is not allowed now."""
        notice = _REFUSALS.get((operation, AccountStatus(self.status)))
        if notice is None:
            return False

        logger.info(
            "account_operation_rejected",
            account_number=str(self.account_number),
            operation=operation,
            status=self.status,
        )
        self._announce(notice)
        return True

    def _announce_balance(self) -> None:
        self._announce(f"Account number: {self.account_number}, balance: {self.balance:.2f}")

    # -------------------------------------------------------------------
    # Status transitions
    # -------------------------------------------------------------------
    def activate(self) -> None:
        if self._refused("activate"):
            return

        self.status = AccountStatus.ACTIVE.value
        self.raise_(
            AccountActivated(
                account_number=str(self.account_number),
                activated_at=datetime.now(UTC),
            )
        )
        self._announce("Account is activated!")

    def suspend(self) -> None:
        if self._refused("suspend"):
            return

        self.status = AccountStatus.SUSPENDED.value
        self.raise_(
            AccountSuspended(
                account_number=str(self.account_number),
                suspended_at=datetime.now(UTC),
            )
        )
        self._announce("Account is suspended!")

    def close(self) -> None:
        if self._refused("close"):
            return

        self.status = AccountStatus.CLOSED.value
        self.raise_(
            AccountClosed(
                account_number=str(self.account_number),
                closed_at=datetime.now(UTC),
            )
        )
        self._announce("Account is closed!")

    # -------------------------------------------------------------------
    # Balance movements
    # -------------------------------------------------------------------
    def deposit(self, amount: float) -> None:
        if self._refused("deposit"):
            return

        self.balance += amount
        self.raise_(
            FundsDeposited(
                account_number=str(self.account_number),
                amount=amount,
                balance=self.balance,
                deposited_at=datetime.now(UTC),
            )
        )
        self._announce_balance()

    def withdraw(self, amount: float) -> None:
        if self._refused("withdraw"):
            return

        self.balance -= amount
        self.raise_(
            FundsWithdrawn(
                account_number=str(self.account_number),
                amount=amount,
                balance=self.balance,
                withdrawn_at=datetime.now(UTC),
            )
        )
        self._announce_balance()
