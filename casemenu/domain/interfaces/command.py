"""Interface for commands.

A command encapsulates a deferred, parameter-free operation together with
the state it needs to run. Invokers only ever see this interface.
"""

import abc


class Command(abc.ABC):
    """Abstract Base Class for executable commands."""

    @abc.abstractmethod
    def execute(self) -> None:
        """Performs the command's operation against its bound receiver.

        May be called any number of times; every call acts on the receiver's
        current state.
        """
        pass
