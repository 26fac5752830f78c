"""Side effects deferred until the request transaction commits."""

from collections.abc import Awaitable, Callable

import logfire

Action = Callable[[], Awaitable[None]]


class AfterCommit:
    """Actions to run once the request's database changes are durable.

    Media store deletes cannot be rolled back, so they wait here until the
    post rows they belong to are committed. A rolled back request never
    runs them.
    """

    def __init__(self) -> None:
        self._pending: list[Action] = []

    def defer(self, action: Action) -> None:
        self._pending.append(action)

    async def run(self) -> None:
        """Run and forget pending actions.

        The transaction is already committed, so a failing action is logged
        and the rest still run.
        """
        pending, self._pending = self._pending, []
        for action in pending:
            try:
                await action()
            except Exception:
                logfire.exception("Deferred action failed after commit")
