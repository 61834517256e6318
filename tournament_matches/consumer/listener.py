"""Listener applying score update events from the message bus."""

import logging
from typing import Optional

from .. import config
from ..codec import Payload, decode_score_update_event
from ..delegate import MatchDelegate
from ..exceptions import DelegateError, ParseError, ScoreValidationError
from ..services.score_validation import validate_score_update

logger = logging.getLogger(__name__)


class MatchScoreUpdateListener:
    """
    Applies ScoreUpdateEvent messages to the match delegate.

    The subscription itself belongs to the bus transport, which calls
    process_message once per delivered message. Failures are logged and
    re-raised so the transport decides whether to ack, drop or dead-letter.
    """

    def __init__(self, delegate: MatchDelegate, enforce_range: Optional[bool] = None):
        """
        Create the listener.

        Args:
            delegate: Match delegate receiving the mutations
            enforce_range: Reject negative scores (default: BUS_ENFORCE_SCORE_RANGE)
        """
        self.delegate = delegate
        if enforce_range is None:
            enforce_range = config.BUS_ENFORCE_SCORE_RANGE
        self.enforce_range = enforce_range

    def process_message(self, message: Payload) -> None:
        """
        Decode, validate and apply one score update message.

        Args:
            message: Raw message body

        Raises:
            ParseError: Message is not a valid ScoreUpdateEvent
            ScoreValidationError: Score rejected by the validation pipeline
            DelegateError: Delegate refused the update
        """
        try:
            event = decode_score_update_event(message)
        except ParseError as e:
            logger.error(f"Malformed score update message: {e}")
            raise

        try:
            # the event has no separate address to compare identifiers against
            mutation = validate_score_update(
                event.to_score_payload(),
                event.tournament_id,
                event.match_id,
                strict_identity=False,
                enforce_range=self.enforce_range,
            )
        except ScoreValidationError as e:
            logger.warning(f"Rejected score update for match {event.match_id}: {e}")
            raise

        try:
            self.delegate.update_match_score(mutation)
        except DelegateError as e:
            logger.error(f"Failed to apply score update for match {event.match_id}: {e}")
            raise

        logger.info(
            f"Applied score {mutation.score.home}-{mutation.score.visitor} "
            f"to match {mutation.id} of tournament {mutation.tournament_id}"
        )
