"""Writer for the bundled context artifact."""

import asyncio
import gzip
from pathlib import Path
from typing import Union


class ContextWriter:
    """
    Append-only text artifact on disk.
    
    Appends go through an asyncio lock and a worker thread, so concurrent
    traversal branches never interleave partial records.
    """
    
    def __init__(self, output_path: Union[str, Path], encoding: str = "utf-8"):
        self.output_path = Path(output_path)
        self.encoding = encoding
        self._lock = asyncio.Lock()
    
    def truncate(self) -> None:
        """Create the output file, or empty it if it already exists."""
        self.output_path.write_text("", encoding=self.encoding)
    
    async def append(self, text: str) -> None:
        """Append text to the artifact without blocking the event loop."""
        async with self._lock:
            await asyncio.to_thread(self._append_sync, text)
    
    def _append_sync(self, text: str) -> None:
        with self.output_path.open("a", encoding=self.encoding, newline="") as out:
            out.write(text)
    
    def read_text(self) -> str:
        """Return the text written so far."""
        return self.output_path.read_text(encoding=self.encoding)
    
    def compress(self) -> bytes:
        """
        Replace the artifact with the gzip encoding of its current text.
        
        Returns:
            The compressed bytes that were written.
        """
        compressed = gzip.compress(self.read_text().encode(self.encoding))
        self.output_path.write_bytes(compressed)
        return compressed
