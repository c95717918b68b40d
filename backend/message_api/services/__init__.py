"""Services Layer — business operations behind the HTTP routes.

Invariants:
    - Services take an AsyncSession and raise MessageApiError subclasses, never HTTPException
"""
