from datetime import datetime
from typing import FrozenSet, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class FetcherConfig(BaseModel):
    """
    Configuração do ResourceFetcher.
    As duas whitelists são fixas depois de criadas (modelo congelado) e são
    passadas explicitamente para quem precisa delas.
    """

    model_config = ConfigDict(frozen=True)

    readable_extensions: FrozenSet[str] = frozenset({".xml"})
    archive_extensions: FrozenSet[str] = frozenset({".zip"})

    # None = default do transporte (sem timeout)
    timeout: Optional[float] = None
    chunk_size: int = Field(default=8192, gt=0)

    # Respostas 4xx/5xx são gravadas como conteúdo, a não ser que isso seja ligado
    reject_error_status: bool = False
    multi_member_policy: Literal["last", "error"] = "last"

    temp_dir: Optional[str] = None

    @field_validator("readable_extensions", "archive_extensions")
    def extensions_must_be_dotted(cls, v):
        cleaned = set()
        for ext in v:
            ext = ext.strip().lower()
            if not ext.startswith(".") or len(ext) < 2:
                raise ValueError(f"extensão inválida: {ext!r} (use '.xml', '.zip')")
            cleaned.add(ext)
        return frozenset(cleaned)

    @model_validator(mode="after")
    def whitelists_must_be_disjoint(self):
        overlap = self.readable_extensions & self.archive_extensions
        if overlap:
            raise ValueError(f"extensões em ambas as whitelists: {sorted(overlap)}")
        return self


class CatalogConfig(BaseModel):
    """Where the listing page lives and how to read links from it."""

    model_config = ConfigDict(frozen=True)

    base_url: str
    listing_path: str = "/"
    link_selector: str = "td a"
    timeout: int = 15

    @field_validator("base_url")
    def base_url_must_be_http(cls, v):
        if not v.lower().startswith(("http://", "https://")):
            raise ValueError("base_url deve começar com http:// ou https://")
        return v


class IngestJobConfig(BaseModel):
    """
    Contrato de configuração de um job de ingestão de feeds.
    Define de onde vêm as URLs, como baixar e onde guardar o resultado.
    """

    job_name: str
    environment: str = Field(default="dev", pattern="^(dev|staging|prod)$")

    # Origem
    catalog: CatalogConfig
    fetcher: FetcherConfig = Field(default_factory=FetcherConfig)
    max_urls: Optional[int] = Field(default=None, gt=0)

    # Destino
    storage: Literal["local", "gcs"] = "local"
    destination_bucket: str
    destination_path: str

    execution_date: str = Field(
        default_factory=lambda: datetime.now().strftime("%Y-%m-%d")
    )

    @property
    def raw_path(self) -> str:
        """Gera o caminho padrão para a camada Raw.

        Formato: <destination_path>/raw/<job_name>/data_captura=YYYY-MM-DD
        """
        return (
            f"{self.destination_path}/raw/"
            f"{self.job_name}/data_captura={self.execution_date}"
        )

    @field_validator("job_name")
    def job_name_must_be_slug(cls, v):
        if " " in v:
            raise ValueError("job_name não deve conter espaços")
        return v.lower()
