# Services package.
#
# Each module exposes a focused set of async functions that encapsulate
# database access for a single entity:
#
#   book_service  — CRUD for Book
#
# All service functions accept an AsyncSession as their first argument;
# the router layer obtains it from the ``get_db`` dependency.
