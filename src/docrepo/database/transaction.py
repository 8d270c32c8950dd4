"""
Transaction Scope for Document Repositories

Wraps a driver session so that commit, abort and release cannot be
skipped on an error path.
"""

import inspect
import logging
from typing import Any, Optional

from docrepo.utils.error_handler import TransactionError


async def resolve(value: Any) -> Any:
    """Await value if the driver returned an awaitable"""
    if inspect.isawaitable(value):
        return await value
    return value


async def begin_transaction(connection: Any) -> Any:
    """Open a session on connection and start a transaction on it"""
    session = await resolve(connection.start_session())
    try:
        await resolve(session.start_transaction())
    except BaseException:
        await resolve(session.end_session())
        raise
    return session


class TransactionScope:
    """
    Async context manager owning one transaction session.

    Usage:
        async with repository.transaction() as session:
            await repository.create(document, SaveOptions(session=session))
            await repository.upsert(filter_query, fields, session=session)

    Commits on clean exit, aborts when the block raises (the original
    exception propagates) and always ends the session.
    """

    def __init__(self, connection: Any, logger: Optional[logging.Logger] = None):
        self.connection = connection
        self.logger = logger or logging.getLogger(__name__)
        self.session: Any = None

    async def __aenter__(self) -> Any:
        self.session = await begin_transaction(self.connection)
        self.logger.debug("Transaction started")
        return self.session

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> bool:
        if self.session is None:
            raise TransactionError("Transaction scope exited before it started", operation="exit")

        try:
            if exc_type is not None:
                await self._abort()
                return False

            await self.session.commit_transaction()
            self.logger.debug("Transaction committed")
            return False
        finally:
            await self.session.end_session()
            self.session = None

    async def _abort(self) -> None:
        if not self.session.in_transaction:
            return
        try:
            await self.session.abort_transaction()
            self.logger.debug("Transaction aborted")
        except Exception:
            # the block's exception still propagates
            self.logger.exception("Failed to abort transaction")


__all__ = [
    "TransactionScope",
    "begin_transaction",
    "resolve",
]
