"""Interfaces (application boundary) for MAILINGLIST.

Defines framework-free application contracts (ABCs) shared by the service
layer and adapters. Business rules stay out of this package.

Dependency rule: may import `mailinglist.domain` only. It may be imported by
`mailinglist.service_layer`, `mailinglist.adapters`, and
`mailinglist.bootstrap`.
"""
