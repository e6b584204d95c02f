"""SD Web UI endpoints.

One coroutine per route of the AUTOMATIC1111 API (``modules/api/api.py``).
Payloads are forwarded as given and results are returned as the transport
parsed them; the annotations describe the documented shapes only.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sdwebui._http import HttpTransport
    from sdwebui.types import (
        CmdFlags,
        Embeddings,
        Extension,
        ExtraBatchImagesOptions,
        ExtraBatchImagesResponse,
        ExtraSingleImageOptions,
        ExtraSingleImageResponse,
        FaceRestorer,
        Hypernetwork,
        Img2ImgOptions,
        Img2ImgResponse,
        InterrogateOptions,
        InterrogateResponse,
        LatentUpscaleMode,
        Lora,
        Memory,
        PngInfoResponse,
        ProgressResponse,
        PromptStyle,
        RealEsrganModel,
        Sampler,
        Scheduler,
        ScriptInfo,
        Scripts,
        SdModel,
        SDOptions,
        SdVae,
        TrainingResponse,
        Txt2ImgOptions,
        Txt2ImgResponse,
        Upscaler,
    )

logger = logging.getLogger(__name__)

OPTIONS_PATH = "/sdapi/v1/options"


class SDWebUIApi:
    def __init__(self, http: HttpTransport) -> None:
        self._http = http

    # ── generation ────────────────────────────────────────────────────

    async def txt2img(self, options: Txt2ImgOptions) -> Txt2ImgResponse:
        """Generate images from a text prompt."""
        return await self._http.post("/sdapi/v1/txt2img", options)  # type: ignore[no-any-return]

    async def img2img(self, options: Img2ImgOptions) -> Img2ImgResponse:
        """Generate images from ``init_images`` plus a prompt."""
        return await self._http.post("/sdapi/v1/img2img", options)  # type: ignore[no-any-return]

    async def extra_single_image(self, options: ExtraSingleImageOptions) -> ExtraSingleImageResponse:
        """Run upscalers / face restoration on one image."""
        return await self._http.post("/sdapi/v1/extra-single-image", options)  # type: ignore[no-any-return]

    async def extra_batch_images(self, options: ExtraBatchImagesOptions) -> ExtraBatchImagesResponse:
        """Run upscalers / face restoration on ``imageList``."""
        return await self._http.post("/sdapi/v1/extra-batch-images", options)  # type: ignore[no-any-return]

    async def png_info(self, image: str | None = None) -> PngInfoResponse:
        """Read the generation parameters embedded in a base64 PNG."""
        body = {} if image is None else {"image": image}
        return await self._http.post("/sdapi/v1/png-info", body)  # type: ignore[no-any-return]

    async def progress(self, *, skip_current_image: bool = False) -> ProgressResponse:
        """Progress of the running job.

        With ``skip_current_image`` the server omits the live preview.
        """
        params = {"skip_current_image": True} if skip_current_image else None
        return await self._http.get("/sdapi/v1/progress", params)  # type: ignore[no-any-return]

    async def interrogate(self, options: InterrogateOptions) -> InterrogateResponse:
        """Caption an image with CLIP or DeepBooru."""
        return await self._http.post("/sdapi/v1/interrogate", options)  # type: ignore[no-any-return]

    async def interrupt(self) -> Any:
        return await self._http.post("/sdapi/v1/interrupt")

    async def skip(self) -> Any:
        return await self._http.post("/sdapi/v1/skip")

    # ── settings ──────────────────────────────────────────────────────

    async def options(self, settings: Mapping[str, Any] | None = None) -> Any:
        """Read the current settings, or write ``settings`` when given.

        Usage::

            current = await api.options()
            await api.options({"sd_model_checkpoint": "v1-5-pruned"})
        """
        if settings is None:
            return await self._http.get(OPTIONS_PATH)
        logger.debug("options: writing %d key(s)", len(settings))
        return await self._http.post(OPTIONS_PATH, settings)

    async def get_options(self) -> SDOptions:
        return await self._http.get(OPTIONS_PATH)  # type: ignore[no-any-return]

    async def set_options(self, settings: SDOptions | Mapping[str, Any]) -> Any:
        return await self._http.post(OPTIONS_PATH, settings)

    async def cmd_flags(self) -> CmdFlags:
        """Command-line flags the server was started with."""
        return await self._http.get("/sdapi/v1/cmd-flags")  # type: ignore[no-any-return]

    # ── listings ──────────────────────────────────────────────────────

    async def samplers(self) -> list[Sampler]:
        return await self._http.get("/sdapi/v1/samplers")  # type: ignore[no-any-return]

    async def schedulers(self) -> list[Scheduler]:
        return await self._http.get("/sdapi/v1/schedulers")  # type: ignore[no-any-return]

    async def upscalers(self) -> list[Upscaler]:
        return await self._http.get("/sdapi/v1/upscalers")  # type: ignore[no-any-return]

    async def latent_upscale_modes(self) -> list[LatentUpscaleMode]:
        return await self._http.get("/sdapi/v1/latent-upscale-modes")  # type: ignore[no-any-return]

    async def sd_models(self) -> list[SdModel]:
        """Checkpoints known to the server."""
        return await self._http.get("/sdapi/v1/sd-models")  # type: ignore[no-any-return]

    async def sd_vae(self) -> list[SdVae]:
        return await self._http.get("/sdapi/v1/sd-vae")  # type: ignore[no-any-return]

    async def hypernetworks(self) -> list[Hypernetwork]:
        return await self._http.get("/sdapi/v1/hypernetworks")  # type: ignore[no-any-return]

    async def face_restorers(self) -> list[FaceRestorer]:
        return await self._http.get("/sdapi/v1/face-restorers")  # type: ignore[no-any-return]

    async def realesrgan_models(self) -> list[RealEsrganModel]:
        return await self._http.get("/sdapi/v1/realesrgan-models")  # type: ignore[no-any-return]

    async def prompt_styles(self) -> list[PromptStyle]:
        return await self._http.get("/sdapi/v1/prompt-styles")  # type: ignore[no-any-return]

    async def embeddings(self) -> Embeddings:
        """Textual inversion embeddings, split into loaded and skipped."""
        return await self._http.get("/sdapi/v1/embeddings")  # type: ignore[no-any-return]

    async def loras(self) -> list[Lora]:
        """LoRAs found by the built-in Lora extension."""
        return await self._http.get("/sdapi/v1/loras")  # type: ignore[no-any-return]

    async def scripts(self) -> Scripts:
        return await self._http.get("/sdapi/v1/scripts")  # type: ignore[no-any-return]

    async def script_info(self) -> list[ScriptInfo]:
        return await self._http.get("/sdapi/v1/script-info")  # type: ignore[no-any-return]

    async def extensions(self) -> list[Extension]:
        return await self._http.get("/sdapi/v1/extensions")  # type: ignore[no-any-return]

    async def memory(self) -> Memory:
        """RAM and CUDA memory statistics."""
        return await self._http.get("/sdapi/v1/memory")  # type: ignore[no-any-return]

    # ── refresh / model lifecycle ─────────────────────────────────────

    async def refresh_embeddings(self) -> Any:
        return await self._http.post("/sdapi/v1/refresh-embeddings")

    async def refresh_checkpoints(self) -> Any:
        return await self._http.post("/sdapi/v1/refresh-checkpoints")

    async def refresh_vae(self) -> Any:
        return await self._http.post("/sdapi/v1/refresh-vae")

    async def refresh_loras(self) -> Any:
        return await self._http.post("/sdapi/v1/refresh-loras")

    async def unload_checkpoint(self) -> Any:
        """Move the loaded checkpoint out of VRAM."""
        return await self._http.post("/sdapi/v1/unload-checkpoint")

    async def reload_checkpoint(self) -> Any:
        """Load the current checkpoint back after ``unload_checkpoint``."""
        return await self._http.post("/sdapi/v1/reload-checkpoint")

    # ── training ──────────────────────────────────────────────────────

    async def create_embedding(self, options: Mapping[str, Any]) -> TrainingResponse:
        return await self._http.post("/sdapi/v1/create/embedding", options)  # type: ignore[no-any-return]

    async def create_hypernetwork(self, options: Mapping[str, Any]) -> TrainingResponse:
        return await self._http.post("/sdapi/v1/create/hypernetwork", options)  # type: ignore[no-any-return]

    async def train_embedding(self, options: Mapping[str, Any]) -> TrainingResponse:
        return await self._http.post("/sdapi/v1/train/embedding", options)  # type: ignore[no-any-return]

    async def train_hypernetwork(self, options: Mapping[str, Any]) -> TrainingResponse:
        return await self._http.post("/sdapi/v1/train/hypernetwork", options)  # type: ignore[no-any-return]

    # ── server control (requires --api-server-stop) ───────────────────

    async def server_kill(self) -> Any:
        return await self._http.post("/sdapi/v1/server-kill")

    async def server_restart(self) -> Any:
        return await self._http.post("/sdapi/v1/server-restart")

    async def server_stop(self) -> Any:
        return await self._http.post("/sdapi/v1/server-stop")
