"""
Client configuration module.

Provides configuration shared by the transport clients and the CLI.
Open for extension through custom configurations.
"""
from dataclasses import dataclass, field
from typing import Optional, Dict


@dataclass
class ClientConfig:
    """
    Complete client configuration.

    Request construction itself only reads ``charset``; the remaining
    settings are applied by the transport clients to every session.
    """
    # User agent
    user_agent: str = 'codeflush-httpclient/1.0.0'

    # Charset used for percent-encoding; None means the platform default
    charset: Optional[str] = None

    # Additional headers sent with every request
    extra_headers: Dict[str, str] = field(default_factory=dict)

    # Logging
    log_level: int = 20  # logging.INFO

    @classmethod
    def default(cls) -> 'ClientConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def with_charset(cls, charset: str, **kwargs) -> 'ClientConfig':
        """Create configuration with a fixed percent-encoding charset."""
        return cls(charset=charset, **kwargs)

    def get_session_headers(self) -> Dict[str, str]:
        """Get headers every transport session starts with."""
        return {
            'User-Agent': self.user_agent,
            **self.extra_headers
        }
