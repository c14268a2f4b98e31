"""Request handlers for the catalog; each returns a rendered template or a redirect."""
