"""
Service layer abstraction.

Each service encapsulates the business rules for one domain.  Services
take the caller identity produced by the security dependencies, load
the club document from the store, validate, mutate and persist.  They
raise the exceptions from ``core.errors``; translating those into HTTP
responses is the job of the API layer.
"""
