"""KR: CLI 패키지. EN: Command line package."""
