"""Account walkthrough.

Opens one account and drives it through the full lifecycle, including the
operations a closed account refuses. Each step prints its notice.

Usage:
    python -m banking.walkthrough
    banking-walkthrough
"""

from banking.account.account import Account
from banking.domain import banking, logger


def run_walkthrough(account_number: str = "1234", opening_balance: float = 10000.0) -> Account:
    """Run the walkthrough against a fresh account. Needs an active domain context."""
    account = Account.open(account_number, opening_balance)

    account.activate()  # already active
    account.suspend()
    account.activate()
    account.deposit(1000.0)
    account.withdraw(100.0)
    account.close()

    # Everything below is refused by the closed account
    account.activate()
    account.suspend()
    account.withdraw(500.0)
    account.deposit(1000.0)

    return account


def main():
    banking.init()

    with banking.domain_context():
        account = run_walkthrough()

    logger.info(
        "walkthrough_finished",
        account_number=str(account.account_number),
        status=account.status,
        balance=account.balance,
    )


if __name__ == "__main__":
    main()
