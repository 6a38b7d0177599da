from typing import Optional


from pydantic import BaseModel, ConfigDict


class Config(BaseModel):
    """Complete application configuration."""

    # YAML reads numeric ids and tokens as numbers
    model_config = ConfigDict(coerce_numbers_to_str=True)

    site_base_url: str = ""
    vimeo_client_id: Optional[str] = None
    vimeo_access_token: Optional[str] = None
    # Secrets, normally taken from environment variables
    vimeo_client_secret: Optional[str] = None
    vimeo_access_token_secret: Optional[str] = None
    api_url: str = "https://vimeo.com/api/rest/v2"
    request_timeout: float = 10.0
    excluded_username: str = "jbossdeveloper"
    description_max_length: int = 150
