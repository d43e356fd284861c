"""
Definition of the interfaces implemented by host start-up initializers.
"""

import abc


class HostInitializerI(abc.ABC):
    """
    A unit of start-up work, run once before the host starts serving.

    Initializers are independent of each other: they run concurrently and in
    no particular order.
    """

    @abc.abstractmethod
    def initialize(self) -> None:
        raise NotImplementedError


class AsyncHostInitializerI(abc.ABC):
    """
    Asynchronous counterpart of :class:`HostInitializerI`.
    """

    @abc.abstractmethod
    async def initialize_async(self) -> None:
        raise NotImplementedError
