"""Template definition service for the CRM: field content, business keys, tenant-unique slugs."""
