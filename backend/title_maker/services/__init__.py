"""
Services Layer

Business logic for title sessions and ideas:
- Accept domain inputs (caller, ids, payloads, database session)
- Return domain outputs (models, lists)
- Raise ActionError subclasses instead of HTTP exceptions
- Do NOT depend on HTTP request/response objects
"""
