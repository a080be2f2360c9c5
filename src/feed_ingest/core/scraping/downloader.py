"""
Downloader (explicação para leigos)

Este arquivo contém o componente que baixa UM arquivo da internet para um
arquivo temporário. A ideia principal é:

- baixar o arquivo em pedaços (stream), para não ocupar muita memória;
- gravar os bytes como vieram (modo binário, sem conversão de texto);
- devolver um `TransientArtifact`, que sabe onde o arquivo está e como
  apagá-lo depois.

Comentários simples:
- "stream": ler o corpo da resposta em blocos pequenos em vez de carregar
  tudo na memória.
- "temporário": o arquivo fica na pasta temporária do sistema; quem recebe o
  artefato é responsável por descartá-lo (`with artifact: ...`).
"""

from __future__ import annotations

from typing import Optional

from feed_ingest.core.config import FetcherConfig
from feed_ingest.core.scraping.artifact import TransientArtifact
from feed_ingest.core.scraping.fetcher import Fetcher
from feed_ingest.core.scraping.locator import ResourceLocator


class Downloader:
    """Baixa uma URL para um arquivo temporário.

    A classe recebe opcionalmente um `Fetcher` (que encapsula as requisições
    HTTP). Isso facilita testes: podemos injetar um `Fetcher` falso que
    devolve respostas controladas.
    """

    def __init__(
        self,
        fetcher: Fetcher | None = None,
        config: Optional[FetcherConfig] = None,
    ):
        self.config = config or FetcherConfig()
        # se nenhum fetcher for passado, criamos um padrão (sem retry)
        self.fetcher = fetcher or Fetcher(timeout=self.config.timeout)

    def download(self, locator: ResourceLocator) -> TransientArtifact:
        """Faz um GET em modo 'stream' e grava o corpo num arquivo temporário.

        Passo a passo:
        1. Reserva o arquivo temporário (sufixo = extensão da URL).
        2. Abre a conexão em modo stream via `fetcher.stream_get(url)`.
        3. Se `reject_error_status` estiver ligado, `raise_for_status()`
           levanta erro para 4xx/5xx. Senão, qualquer resposta é gravada.
        4. Grava os chunks em binário até o fim do corpo.

        Se qualquer passo falhar, o arquivo temporário é apagado e o erro
        recebido sobe para o chamador.
        """
        artifact = TransientArtifact.create(
            locator.url,
            suffix=locator.extension,
            prefix="downloaded_file_",
            dir=self.config.temp_dir,
        )
        try:
            resp = self.fetcher.stream_get(locator.url)
            with resp as r:
                artifact.status_code = r.status_code
                if self.config.reject_error_status:
                    r.raise_for_status()
                with open(artifact.path, "wb") as fh:
                    for chunk in r.iter_content(chunk_size=self.config.chunk_size):
                        if not chunk:
                            continue
                        fh.write(chunk)
        except BaseException:
            artifact.dispose()
            raise
        return artifact
