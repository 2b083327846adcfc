# termion/writer.py

import io
from typing import Any, Iterable, Optional, Union

from ..logger import Logger
from ..style.definitions import StyledStr
from .engine import termion

_default_logger = Logger(__name__)


def _is_text_sink(sink: Any) -> bool:
    """Return True if the sink takes str rather than bytes."""
    return isinstance(sink, io.TextIOBase) or hasattr(sink, 'encoding')


def _write_all(sink: Any, data: bytes) -> None:
    """Write every byte of data; binary writes may be partial."""
    while data:
        written = sink.write(data)
        if written is None:
            # a raw stream that would block wrote nothing; other
            # writers that return None took the whole chunk
            if not isinstance(sink, io.RawIOBase):
                return
            written = 0
        data = data[written:]


def _write(sink: Any, styled: Union[StyledStr, str], text_sink: bool) -> None:
    for chunk in termion(styled).chunks():
        if text_sink:
            sink.write(chunk)
        else:
            _write_all(sink, chunk.encode('utf-8'))


def render(sink: Any, styled: Union[StyledStr, str],
           logger: Optional[Logger] = None) -> None:
    """
    Render one styled string to the sink.

    Args:
        sink: Writable text or binary stream.
        styled: StyledStr, or a str rendered without formatting.
        logger: Optional Logger; defaults to the module logger.

    Raises:
        Whatever the sink raises on write. Output written before the
        failure stays in the sink.
    """
    logger = logger or _default_logger
    try:
        _write(sink, styled, _is_text_sink(sink))
    except Exception as e:
        logger.error(f"Write error while rendering: {e}")
        raise


def render_iter(sink: Any, items: Iterable[Union[StyledStr, str]],
                logger: Optional[Logger] = None) -> None:
    """
    Render styled strings to the sink in order, writing each as it comes.

    Stops at the first write failure and re-raises it; items before the
    failing one have already been written. The iterable is consumed once.
    """
    logger = logger or _default_logger
    text_sink = _is_text_sink(sink)
    count = 0
    for styled in items:
        try:
            _write(sink, styled, text_sink)
        except Exception as e:
            logger.error(f"Write error on item {count}: {e}")
            raise
        count += 1
    logger.debug(f"Rendered {count} styled strings")
