"""
MarketAI content generator.

Provides:
- Prompt builder for marketing content categories
- Relay service that forwards chat completions to OpenAI with a server-held key
- Command-line client and session controller
"""
