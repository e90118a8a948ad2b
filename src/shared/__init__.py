"""Cross-cutting pieces shared by the payment and customer handlers.

Configuration, logging, exceptions, custom type definitions and the
request/response bookkeeping that turns gateway calls into update actions.
"""
