"""Services: the fetch -> dispatch flow, free of terminal side effects."""
