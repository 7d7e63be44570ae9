"""Run a force layout off the calling thread, with cancellation."""

import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor

from ..graph import Graph, Position
from .force import ForceConfig, fruchterman_reingold


class LayoutJob:
    """A single force-layout run on a background thread.

    The job owns its cancellation event and its executor; cancelling takes
    effect at the next iteration boundary, after which :meth:`result` raises
    ``LayoutCancelled``.
    """

    def __init__(
        self,
        graph: Graph,
        iterations: int,
        config: ForceConfig | None = None,
        progress: Callable[[int, list[Position]], None] | None = None,
    ):
        self.graph = graph
        self.iterations = iterations
        self.config = config
        self.progress = progress
        self._cancel = threading.Event()
        self._executor: ThreadPoolExecutor | None = None
        self._future: Future | None = None

    def start(self) -> "LayoutJob":
        if self._future is not None:
            raise RuntimeError("Layout job already started")
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="force-layout")
        self._future = self._executor.submit(
            fruchterman_reingold,
            self.graph,
            self.iterations,
            self.config,
            cancel=self._cancel,
            progress=self.progress,
        )
        # The worker thread exits once the single task completes
        self._executor.shutdown(wait=False)
        return self

    def cancel(self) -> None:
        self._cancel.set()

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    def done(self) -> bool:
        return self._future is not None and self._future.done()

    def result(self, timeout: float | None = None) -> list[Position]:
        """Wait for the layout and return its positions.

        Raises:
            RuntimeError: If the job was never started.
            LayoutCancelled: If the job was cancelled before finishing.
            TimeoutError: If ``timeout`` elapses first.
        """
        if self._future is None:
            raise RuntimeError("Layout job not started")
        return self._future.result(timeout=timeout)
