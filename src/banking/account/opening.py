"""Account opening: command and handler."""

from protean import handle
from protean.fields import Float, Identifier
from protean.utils.globals import current_domain

from banking.account.account import Account
from banking.domain import banking


@banking.command(part_of="Account")
class OpenAccount:
    """Open a new account with an opening balance."""

    account_number = Identifier(required=True)
    opening_balance = Float(default=0.0)


@banking.command_handler(part_of=Account)
class OpenAccountHandler:
    @handle(OpenAccount)
    def open_account(self, command):
        account = Account.open(
            account_number=str(command.account_number),
            opening_balance=command.opening_balance,
        )
        current_domain.repository_for(Account).add(account)
        return str(account.account_number)
