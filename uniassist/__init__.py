"""UniAssist: compatibility scoring for universities, mentors and roommates."""

__version__ = "0.1.0"
