"""Wire-format layer: pydantic schemas and mappers to and from the domain."""
