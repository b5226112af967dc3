"""Deposits and withdrawals: commands and handler."""

from protean import handle
from protean.fields import Float, Identifier
from protean.utils.globals import current_domain

from banking.account.account import Account
from banking.domain import banking


@banking.command(part_of="Account")
class DepositFunds:
    """Pay an amount into an account."""

    account_number = Identifier(required=True)
    amount = Float(required=True)


@banking.command(part_of="Account")
class WithdrawFunds:
    """Take an amount out of an account."""

    account_number = Identifier(required=True)
    amount = Float(required=True)


@banking.command_handler(part_of=Account)
class FundsHandler:
    @handle(DepositFunds)
    def deposit_funds(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_number)
        account.deposit(command.amount)
        repo.add(account)

    @handle(WithdrawFunds)
    def withdraw_funds(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_number)
        account.withdraw(command.amount)
        repo.add(account)
