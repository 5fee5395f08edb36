"""On-chain character source configuration models."""

from pydantic import BaseModel


class OnchainSettings(BaseModel):
    wallet_address: str = ""
    rpc_url: str = ""
    character_json: str = ""

    @property
    def configured(self) -> bool:
        return bool(self.wallet_address and self.rpc_url)
