from abc import abstractmethod
from typing import Any, Iterable, Union
from ..core.adapter import adapt
from ..core.commands import Command
from ..core.path import Path
from ..core.sink import PathSink


class PathEncoder(PathSink):
    """
    Encodes a path into an output format. Encoding means converting the
    path commands into something else: SVG path data, drawing calls on a
    cairo context, or any other target.

    An encoder only implements the command shapes its policy allows;
    encode() routes the input through a PathAdapter so that the rest of
    the vocabulary is rewritten before it reaches the encoder.
    """

    def encode(self, path: Union[Path, Iterable[Command]]) -> Any:
        sink = adapt(self)
        for command in path:
            command.apply(sink)
        return self.result()

    @abstractmethod
    def result(self) -> Any:
        """Returns the output produced so far."""
        pass
