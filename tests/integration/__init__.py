"""
Integration tests package.

Tests que levantan la aplicación completa (TestClient) y verifican:
- /health y /health/live responden sin dependencias
- /health/ready consulta el store de contactos y responde 503 si falla

Para ejecutar solo tests de integración:
    pytest tests/integration/
"""
