"""Weather Forecast API: versioned CRUD service with per-version OpenAPI documents."""
