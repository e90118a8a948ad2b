"""commercetools API extension endpoint.

Receives extension calls, dispatches them by resource type and answers with
update actions (or a commercetools error response).
"""
