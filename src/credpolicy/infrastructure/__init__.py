"""Infrastructure collaborators for credpolicy.

Hashing and token issuance adapters that run after a credential has been
accepted by a policy.
"""
