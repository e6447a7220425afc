"""Support API endpoints."""

from __future__ import annotations

from outseta.models import Case
from outseta.models import CaseReply
from outseta.pagination import ItemPage
from outseta.pagination import PageRequest
from outseta.rest.base import BaseClient


class SupportClient(BaseClient):
    """Support cases."""

    def get_case(self, case_id: str) -> Case:
        self._require_id(case_id, "Case id")
        return self._get_object(f"/support/cases/{case_id}", Case)

    def get_case_page(self, page_request: PageRequest) -> ItemPage[Case]:
        return self._get_page("/support/cases", Case, page_request)

    def add_case(self, send_auto_responder: bool, case: Case) -> Case:
        """Open a support case.

        Args:
            send_auto_responder: Send the automatic reply to the submitter
            case: Case to open

        Returns:
            Created case
        """
        self._require(case, "Case request")
        return self._post_object(
            "/support/cases",
            case,
            Case,
            params={"sendAutoResponder": "true" if send_auto_responder else "false"},
        )

    def add_client_response(self, case_uid: str, comment: str) -> None:
        """Add a response from the client to a case.

        The comment travels in the URL path.
        """
        self._require_id(case_uid, "Case uid")
        self._require_id(comment, "Comment")
        safe_comment = comment.replace(" ", "%20")
        self._post(f"/support/cases/{case_uid}/clientresponse/{safe_comment}", payload="")

    def add_reply(self, case_uid: str, reply: CaseReply) -> Case:
        """Add an agent reply to a case."""
        self._require_id(case_uid, "Case uid")
        self._require(reply, "Case reply")
        return self._post_object(f"/support/cases/{case_uid}/replies", reply, Case)
