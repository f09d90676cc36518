from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

CLAUDE_DIR = ".claude"
TRANSLATION_FILE = "translation_config.json"
ACEMCP_FILE = "acemcp_config.json"


class TranslationConfig(BaseModel):
    enabled: bool = False
    api_base_url: str = "https://api.siliconflow.cn/v1"
    api_key: str = ""
    model: str = "tencent/Hunyuan-MT-7B"
    timeout_seconds: int = Field(default=30, gt=0)
    cache_ttl_seconds: int = Field(default=3600, ge=0)


class AcemcpConfig(BaseModel):
    # stored with camelCase keys, either spelling accepted on load
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    base_url: str = ""
    token: str = ""
    batch_size: int = Field(default=10, gt=0)
    max_lines_per_blob: int = Field(default=800, gt=0)
