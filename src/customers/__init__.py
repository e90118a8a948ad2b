"""Customer extension handlers: find, create and vault Braintree customers.

A commercetools customer is linked to its Braintree counterpart through the
``customerId`` custom field, which the handlers fill in once the gateway
has assigned an id.
"""
