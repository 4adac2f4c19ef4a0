from dataclasses import dataclass


# fmt: off
@dataclass(frozen=True)
class URLRecordModel:
    long_url: str            # Redirect target
    short_url: str           # Alias, unique lookup key
    exp: int | None = None   # Absolute Unix timestamp (seconds) after which the alias is gone
    id: str | None = None    # Store-assigned identifier, never set by clients

    def expired(self, now: float) -> bool:
        return self.exp is not None and now > self.exp
# fmt: on
