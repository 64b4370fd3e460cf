"""Admin decisions on reviewer applications.

Deciding and notifying are two steps: ``approve``/``reject`` change the
account inside the caller's transaction, and ``notify_decision`` emails the
reviewer once the caller has committed it.
"""

import logging

from voicehub_identity.domain.account import (
    Account,
    AccountNotFoundError,
    AccountRepository,
    AccountRole,
    AccountStatus,
)
from voicehub_identity.infrastructure.email import EmailService

logger = logging.getLogger(__name__)


class ReviewerReviewService:
    """Administrative decisions on reviewer applications.

    Approving or rejecting is only possible while an application is
    pending.
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        email_service: EmailService,
        frontend_base_url: str,
    ):
        self._account_repo = account_repository
        self._email_service = email_service
        self._frontend_base_url = frontend_base_url.rstrip("/")

    async def list_reviewers(self, status: AccountStatus | None = None) -> list[Account]:
        return await self._account_repo.list_by_role(AccountRole.REVIEWER, status)

    async def approve(self, email: str) -> Account:
        reviewer = await self._get_reviewer(email)
        reviewer.approve()
        await self._account_repo.save(reviewer)
        logger.info("Reviewer application approved: %s", reviewer.email)
        return reviewer

    async def reject(self, email: str) -> Account:
        reviewer = await self._get_reviewer(email)
        reviewer.reject()
        await self._account_repo.save(reviewer)
        logger.info("Reviewer application rejected: %s", reviewer.email)
        return reviewer

    def notify_decision(self, reviewer: Account) -> None:
        """Email the reviewer about a committed decision.

        Delivery failures are logged, the decision stands either way.
        """
        try:
            if reviewer.status == AccountStatus.ACTIVE:
                self._email_service.send_reviewer_approved_email(
                    to_email=reviewer.email,
                    reviewer_name=reviewer.name,
                    dashboard_link=f"{self._frontend_base_url}/dashboard",
                )
            elif reviewer.status == AccountStatus.REJECTED:
                self._email_service.send_reviewer_rejected_email(
                    to_email=reviewer.email,
                    reviewer_name=reviewer.name,
                )
            else:
                logger.debug(
                    "No decision to notify for %s (%s)",
                    reviewer.email,
                    reviewer.status.value,
                )
        except Exception as e:
            logger.error("Failed to send decision email to %s: %s", reviewer.email, e)

    async def _get_reviewer(self, email: str) -> Account:
        reviewer = await self._account_repo.find_by_email_and_role(
            email,
            AccountRole.REVIEWER,
        )
        if reviewer is None:
            raise AccountNotFoundError(email)
        return reviewer
