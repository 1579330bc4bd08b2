"""
Configuration module for the Candidate Ranking Engine.
Loads and validates configuration from YAML file using Pydantic models.
"""

from pydantic import BaseModel, Field
from typing import Optional
import yaml
import os


class ScoreCaps(BaseModel):
    """Upper bound for each scoring dimension."""
    experience: int = Field(default=25, ge=0)
    title: int = Field(default=20, ge=0)
    company: int = Field(default=15, ge=0)
    skills: int = Field(default=20, ge=0)
    job_fit: int = Field(default=15, ge=0)
    contact_info: int = Field(default=10, ge=0)
    data_quality: int = Field(default=10, ge=0)
    total: int = Field(default=100, ge=0, le=100)


class EnhancementConfig(BaseModel):
    """Settings for the optional AI summary rewrite."""
    enabled: bool = False
    top_n: int = 5
    delay_seconds: float = 1.0
    api_url: str = "https://api.openai.com/v1"
    model: str = "gpt-3.5-turbo"
    api_key_env: str = "OPENAI_API_KEY"
    timeout: float = 20.0
    max_tokens: int = 150
    temperature: float = 0.7


class Config(BaseModel):
    """Main configuration model."""
    default_industry: str = "tech"
    catalog_path: Optional[str] = None
    max_workers: int = Field(default=4, ge=1)
    scoring_caps: ScoreCaps = Field(default_factory=ScoreCaps)
    enhancement: EnhancementConfig = Field(default_factory=EnhancementConfig)


def load_config(path: str = "config.yaml") -> Config:
    """
    Load and validate configuration from YAML file.

    Args:
        path: Path to configuration file (default: config.yaml)

    Returns:
        Validated Config object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML syntax is invalid
        ValueError: If the file is empty or its structure is invalid
    """
    if not os.path.exists(path):
        raise FileNotFoundError(
            f"Configuration file not found: {path}\n"
            f"Please copy config.example.yaml to {path} and customize it."
        )

    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(
            f"Invalid YAML syntax in {path}: {e}"
        )

    if data is None:
        raise ValueError(f"Configuration file {path} is empty")

    try:
        config = Config(**data)
    except Exception as e:
        raise ValueError(
            f"Invalid configuration structure in {path}: {e}\n"
            f"Please check config.example.yaml for the correct format."
        )

    return config
