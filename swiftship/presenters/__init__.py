"""
Presentation surfaces: render a validation error or a QuoteResult.

Same core result, different rendering: a native-style alert dialog or an
in-app modal overlay. Presenters return plain dict payloads for the client.
"""
