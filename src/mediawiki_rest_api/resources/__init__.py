"""Resource accessors for the MediaWiki REST API.

Contains one module per REST resource. ``page``, ``revision`` and ``file``
provide small value objects wrapping the resource identifier; ``search``,
``math`` and ``transform`` provide module-level functions. Every operation
takes the shared :class:`~mediawiki_rest_api.session.RestApi` session.
"""
