# src/photon_cli/research/service.py
"""
Research service: question in, FormattedResult out.

Ties together model resolution, prompt building, the transport and the
parser. Transport failures become a displayable result rather than an
exception; registry errors still propagate to the caller.
"""

from __future__ import annotations

import asyncio
import logging

from pydantic import BaseModel, Field

from photon_cli.constants.timeouts import QUERY_DEADLINE
from photon_cli.core.model_resolver import ModelResolver, ResolvedModel
from photon_cli.exceptions import TransportError
from photon_cli.model_management import ModelRef
from photon_cli.research.client import OpenRouterClient
from photon_cli.research.formatter import (
    FormattedResult,
    build_prompt,
    error_result,
    format_response,
)

logger = logging.getLogger(__name__)


class ResearchOutcome(BaseModel):
    """What the UI shows: a result, or the fallback when the deadline passed."""

    result: FormattedResult | None = Field(default=None)
    fallback: bool = Field(default=False)

    model_config = {"frozen": True}


class ResearchState:
    """
    Settles exactly once, on either a result or the deadline.

    Anything delivered after settlement is stale and ignored.
    """

    def __init__(self) -> None:
        self._result: FormattedResult | None = None
        self._fallback = False
        self._settled = False

    @property
    def settled(self) -> bool:
        return self._settled

    @property
    def fallback(self) -> bool:
        return self._fallback

    @property
    def result(self) -> FormattedResult | None:
        return self._result

    def deliver(self, result: FormattedResult) -> bool:
        """Record a result. Returns False if the state was already settled."""
        if self._settled:
            return False
        self._result = result
        self._settled = True
        return True

    def expire(self) -> bool:
        """Switch to the fallback. Returns False if the state was already settled."""
        if self._settled:
            return False
        self._fallback = True
        self._settled = True
        return True

    def to_outcome(self) -> ResearchOutcome:
        return ResearchOutcome(result=self._result, fallback=self._fallback)


class ResearchService:
    """Runs research queries against OpenRouter."""

    def __init__(
        self,
        client: OpenRouterClient,
        resolver: ModelResolver | None = None,
    ):
        self.client = client
        self.resolver = resolver or ModelResolver()

    async def research(
        self, question: str, ref: ModelRef | None = None
    ) -> FormattedResult:
        """
        Ask a question and parse the answer.

        Raises:
            ModelNotFoundError: if ``ref`` names an unknown registry id
        """
        resolved = self.resolver.resolve(ref)
        return await self._run(question, resolved)

    async def research_with_deadline(
        self,
        question: str,
        ref: ModelRef | None = None,
        deadline: float = QUERY_DEADLINE,
    ) -> ResearchOutcome:
        """
        Ask a question, giving up on the answer after ``deadline`` seconds.

        The request itself is not cancelled when the deadline passes; its
        result is discarded when it eventually arrives.

        Raises:
            ModelNotFoundError: if ``ref`` names an unknown registry id
        """
        resolved = self.resolver.resolve(ref)
        state = ResearchState()

        task = asyncio.create_task(self._run(question, resolved))
        done, _ = await asyncio.wait({task}, timeout=deadline)

        if task in done:
            state.deliver(task.result())
        else:
            state.expire()
            logger.info(f"No answer from {resolved.api_name} within {deadline}s")
            task.add_done_callback(lambda t: self._discard_stale(t, state))

        return state.to_outcome()

    async def _run(self, question: str, resolved: ResolvedModel) -> FormattedResult:
        prompt = build_prompt(question, resolved.model)
        try:
            text = await self.client.complete(resolved.api_name, prompt)
        except TransportError as e:
            logger.warning(f"Research request failed: {e.message}")
            return error_result(e.message)
        return format_response(text, thinking=resolved.is_thinking)

    @staticmethod
    def _discard_stale(task: asyncio.Task, state: ResearchState) -> None:
        if task.cancelled():
            logger.debug("Stale research request cancelled")
            return
        exc = task.exception()
        if exc is not None:
            logger.debug(f"Stale research request failed: {exc}")
            return
        if not state.deliver(task.result()):
            logger.debug("Discarding stale research result")
