"""A double-buffered framebuffer that copies to its target on flush."""

from __future__ import annotations

from d3kit.lfb import LinearFrameBuffer


class BufferedFrameBuffer:
    """Draw into an off-screen copy and copy rows to the target on demand."""

    def __init__(self, target: LinearFrameBuffer) -> None:
        self._target = target
        self._buffer = bytearray(target.pitch * target.height)
        self._lfb = LinearFrameBuffer(
            self._buffer, target.pitch, target.width, target.height, target.bpp
        )

    @property
    def lfb(self) -> LinearFrameBuffer:
        """The off-screen framebuffer to draw into."""
        return self._lfb

    @property
    def target(self) -> LinearFrameBuffer:
        """The framebuffer that receives flushed content."""
        return self._target

    def flush_lines(self, start: int, count: int) -> None:
        """Copy ``count`` rows starting at row ``start`` to the target."""
        if start < 0 or count < 0 or start + count > self._lfb.height:
            raise ValueError(
                f"rows {start}..{start + count} out of range for height {self._lfb.height}"
            )
        pitch = self._lfb.pitch
        begin = pitch * start
        end = begin + pitch * count
        self._target.buffer[begin:end] = self._buffer[begin:end]

    def flush(self) -> None:
        """Copy the whole off-screen buffer to the target."""
        self.flush_lines(0, self._lfb.height)