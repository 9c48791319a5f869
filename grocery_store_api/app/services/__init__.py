"""
Service layer abstraction.

Services hold the request logic and talk to storage only through an
injected data-access service, so handlers stay thin and storage can be
swapped in tests.
"""
