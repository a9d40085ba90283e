"""Build-time use cases: schema validation, dataset assembly and conversion."""
