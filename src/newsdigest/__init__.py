"""NewsDigest: extract text from uploads and summarize it with an LLM."""

__version__ = "0.1.0"
