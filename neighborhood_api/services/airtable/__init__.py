from neighborhood_api.services.airtable.client import AirtableClient, AirtableConfig, AirtableError

__all__ = ["AirtableClient", "AirtableConfig", "AirtableError"]
