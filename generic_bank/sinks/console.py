"""Console sink for listing repository contents."""

import json
from typing import Any, Iterable, TextIO

from generic_bank.sinks.serialization import to_dict


class ConsoleSink:
    """Print entity listings to a text stream (stdout by default)."""

    def __init__(
        self,
        as_json: bool = False,
        pretty: bool = False,
        stream: TextIO | None = None,
    ) -> None:
        """Initialize console sink.

        Parameters
        ----------
        as_json : bool
            Print records as JSON instead of their descriptions.
        pretty : bool
            Indent JSON output.
        stream : TextIO | None
            Target stream; resolved to ``sys.stdout`` at write time when None.
        """
        self.as_json = as_json
        self.pretty = pretty
        self.stream = stream
        self._counts: dict[str, int] = {}

    def write_batch(self, title: str, records: Iterable[Any]) -> None:
        """Print a heading followed by one entry per record."""
        print(f"\n--- {title} ---", file=self.stream)

        count = 0
        for record in records:
            print(self._render(record), file=self.stream)
            count += 1

        self._counts[title] = self._counts.get(title, 0) + count

    def write_line(self, message: str) -> None:
        print(message, file=self.stream)

    def close(self) -> None:
        """Print summary of everything written."""
        print("\n--- Console Sink Summary ---", file=self.stream)
        for title, count in self._counts.items():
            print(f"  {title}: {count} records", file=self.stream)

    def _render(self, record: Any) -> str:
        if not self.as_json:
            return str(record)
        data = to_dict(record)
        if self.pretty:
            return json.dumps(data, indent=2, ensure_ascii=False)
        return json.dumps(data, ensure_ascii=False)
