"""
ddlscribe core: platforms, dialects, privilege mapping, schema engine,
user statements and the builder façade.
"""
