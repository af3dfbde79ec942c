"""Python counterpart of the SPA data views: API wrapper, optimistic lists, reports."""
