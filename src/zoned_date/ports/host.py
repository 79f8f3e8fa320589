from zoned_date.domain.instant import UtcInstant


class HostDatePort:
    """Native date behaviour used for instants that carry no zone."""

    def now(self) -> int:
        raise NotImplementedError

    def timezone_offset(self, instant: UtcInstant) -> float:
        """Host offset in minutes (UTC minus local) at ``instant``."""
        raise NotImplementedError

    def to_string(self, instant: UtcInstant) -> str:
        raise NotImplementedError

    def parse(self, text: str) -> float:
        """Epoch milliseconds for ``text``, or ``nan`` when it cannot be read."""
        raise NotImplementedError
