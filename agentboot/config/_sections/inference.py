"""Verifiable inference adapter configuration models."""

from pydantic import BaseModel


class InferenceSettings(BaseModel):
    verifiable_inference_enabled: bool = False
    opacity_team_id: str = ""
    opacity_cloudflare_name: str = ""
    opacity_prover_url: str = ""
    primus_app_id: str = ""
    primus_app_secret: str = ""
