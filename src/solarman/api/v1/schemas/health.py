from pydantic import BaseModel, ConfigDict, Field


class CredentialsLoaded(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sandbox_loaded: bool = Field(alias="sandboxLoaded")
    live_loaded: bool = Field(alias="liveLoaded")


class HealthOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str = "healthy"
    service: str
    timestamp: str
    environment: str
    total_orders: int = Field(alias="totalOrders")
    version: str
    credentials: CredentialsLoaded


class CredentialPair(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    client_id: bool = Field(alias="clientId")
    client_secret: bool = Field(alias="clientSecret")


class CredentialsOut(BaseModel):
    sandbox: CredentialPair
    live: CredentialPair
