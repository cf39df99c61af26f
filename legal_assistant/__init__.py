"""Legal assistant backend: IPC analysis, legal chat, case law and transcription."""

__version__ = "1.0.0"
