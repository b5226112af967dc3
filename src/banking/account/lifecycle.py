"""Account lifecycle: activate, suspend and close commands with their handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from banking.account.account import Account
from banking.domain import banking


@banking.command(part_of="Account")
class ActivateAccount:
    """Return a suspended account to active status."""

    account_number = Identifier(required=True)


@banking.command(part_of="Account")
class SuspendAccount:
    """Temporarily freeze an active account."""

    account_number = Identifier(required=True)


@banking.command(part_of="Account")
class CloseAccount:
    """Permanently close an account."""

    account_number = Identifier(required=True)


@banking.command_handler(part_of=Account)
class ManageAccountHandler:
    @handle(ActivateAccount)
    def activate_account(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_number)
        account.activate()
        repo.add(account)

    @handle(SuspendAccount)
    def suspend_account(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_number)
        account.suspend()
        repo.add(account)

    @handle(CloseAccount)
    def close_account(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.get(command.account_number)
        account.close()
        repo.add(account)
