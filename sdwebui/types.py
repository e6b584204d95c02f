"""Request and response shapes of the SD Web UI API.

These mirror the JSON the server documents. They are static declarations
only: nothing here is validated at runtime, and every option mapping is
``total=False`` since the server fills in defaults for omitted keys.
"""

from __future__ import annotations

from typing import Any, TypedDict

# ── generation ────────────────────────────────────────────────────────


class OverrideSettings(TypedDict, total=False):
    sd_model_checkpoint: str
    sd_vae: str
    CLIP_stop_at_last_layers: int
    enable_pnginfo: bool
    add_model_hash_to_info: bool
    add_model_name_to_info: bool


class Txt2ImgOptions(TypedDict, total=False):
    prompt: str
    negative_prompt: str
    styles: list[str] | None
    seed: int
    subseed: int
    subseed_strength: float
    seed_resize_from_h: int
    seed_resize_from_w: int
    sampler_name: str
    scheduler: str | None
    batch_size: int
    n_iter: int
    steps: int
    cfg_scale: float
    width: int
    height: int
    restore_faces: bool | None
    tiling: bool | None
    do_not_save_samples: bool
    do_not_save_grid: bool
    eta: float | None
    denoising_strength: float | None
    s_min_uncond: float | None
    s_churn: float | None
    s_tmax: float | None
    s_tmin: float | None
    s_noise: float | None
    override_settings: OverrideSettings | dict[str, Any] | None
    override_settings_restore_afterwards: bool
    refiner_checkpoint: str | None
    refiner_switch_at: float | None
    disable_extra_networks: bool
    firstpass_image: str | None
    comments: dict[str, Any] | None
    enable_hr: bool
    firstphase_width: int
    firstphase_height: int
    hr_scale: float
    hr_upscaler: str | None
    hr_second_pass_steps: int
    hr_resize_x: int
    hr_resize_y: int
    hr_checkpoint_name: str | None
    hr_sampler_name: str | None
    hr_scheduler: str | None
    hr_prompt: str
    hr_negative_prompt: str
    force_task_id: str | None
    sampler_index: str
    script_name: str | None
    script_args: list[Any]
    send_images: bool
    save_images: bool
    alwayson_scripts: dict[str, Any] | None
    infotext: str | None


class Img2ImgOptions(Txt2ImgOptions, total=False):
    init_images: list[str]
    resize_mode: int
    image_cfg_scale: float
    mask: str | None
    mask_blur_x: int
    mask_blur_y: int
    mask_blur: int
    mask_round: bool
    inpainting_fill: int
    inpaint_full_res: bool
    inpaint_full_res_padding: int
    inpainting_mask_invert: int
    initial_noise_multiplier: float | None
    latent_mask: str | None
    include_init_images: bool


class Txt2ImgResponse(TypedDict):
    images: list[str]
    parameters: dict[str, Any]
    info: str


class Img2ImgResponse(Txt2ImgResponse):
    pass


# ── extras / postprocessing ───────────────────────────────────────────


class ExtraImageListItem(TypedDict):
    data: str
    name: str


class _ExtraImageBase(TypedDict, total=False):
    resize_mode: int
    show_extras_results: bool
    gfpgan_visibility: float
    codeformer_visibility: float
    codeformer_weight: float
    upscaling_resize: float
    upscaling_resize_w: int
    upscaling_resize_h: int
    upscaling_crop: bool
    upscaler_1: str
    upscaler_2: str
    extras_upscaler_2_visibility: float
    upscale_first: bool


class ExtraSingleImageOptions(_ExtraImageBase, total=False):
    image: str


class ExtraBatchImagesOptions(_ExtraImageBase, total=False):
    imageList: list[ExtraImageListItem]  # noqa: N815


class ExtraSingleImageResponse(TypedDict):
    html_info: str
    image: str


class ExtraBatchImagesResponse(TypedDict):
    html_info: str
    images: list[str]


class PngInfoResponse(TypedDict, total=False):
    info: str
    items: dict[str, Any]
    parameters: dict[str, Any]


class ProgressResponse(TypedDict):
    progress: float
    eta_relative: float
    state: dict[str, Any]
    current_image: str | None
    textinfo: str | None


class InterrogateOptions(TypedDict, total=False):
    image: str
    model: str


class InterrogateResponse(TypedDict):
    caption: str


# ── settings ──────────────────────────────────────────────────────────


class SDOptions(TypedDict, total=False):
    """Commonly used server settings.

    The server exposes several hundred keys; the facade accepts any mapping
    so unlisted keys can still be read and written.
    """

    samples_save: bool
    samples_format: str
    samples_filename_pattern: str
    grid_save: bool
    grid_format: str
    jpeg_quality: int
    outdir_samples: str
    outdir_txt2img_samples: str
    outdir_img2img_samples: str
    outdir_extras_samples: str
    outdir_grids: str
    save_to_dirs: bool
    upscaler_for_img2img: str
    face_restoration: bool
    face_restoration_model: str
    code_former_weight: float
    sd_model_checkpoint: str
    sd_checkpoints_limit: int
    sd_checkpoint_cache: int
    sd_unet: str
    CLIP_stop_at_last_layers: int
    upcast_attn: bool
    randn_source: str
    tiling: bool
    sd_vae: str
    sd_vae_checkpoint_cache: int
    sd_vae_encode_method: str
    sd_vae_decode_method: str
    inpainting_mask_weight: float
    initial_noise_multiplier: float
    img2img_color_correction: bool
    img2img_fix_steps: bool
    cross_attention_optimization: str
    s_min_uncond: float
    token_merging_ratio: float
    sd_hypernetwork: str
    enable_pnginfo: bool
    add_model_name_to_info: bool
    add_model_hash_to_info: bool
    live_previews_enable: bool
    show_progress_every_n_steps: int
    eta_ddim: float
    eta_ancestral: float
    s_churn: float
    s_tmin: float
    s_tmax: float
    s_noise: float
    eta_noise_seed_delta: int
    sd_checkpoint_hash: str


class CmdFlags(TypedDict, total=False):
    data_dir: str
    models_dir: str
    ckpt: str
    ckpt_dir: str
    vae_dir: str
    embeddings_dir: str
    hypernetwork_dir: str
    lora_dir: str
    no_half: bool
    no_half_vae: bool
    medvram: bool
    medvram_sdxl: bool
    lowvram: bool
    precision: str
    xformers: bool
    opt_sdp_attention: bool
    listen: bool
    port: int | None
    api: bool
    api_auth: str | None
    api_log: bool
    nowebui: bool
    device_id: str | None
    subpath: str | None
    api_server_stop: bool
    skip_load_model_at_start: bool


# ── listings ──────────────────────────────────────────────────────────


class Sampler(TypedDict):
    name: str
    aliases: list[str]
    options: dict[str, str]


class Scheduler(TypedDict):
    name: str
    label: str
    aliases: list[str] | None
    default_rho: float
    need_inner_model: bool


class Upscaler(TypedDict):
    name: str
    model_name: str | None
    model_path: str | None
    model_url: str | None
    scale: float | None


class LatentUpscaleMode(TypedDict):
    name: str


class SdModel(TypedDict):
    title: str
    model_name: str
    hash: str | None
    sha256: str | None
    filename: str
    config: str | None


class SdVae(TypedDict):
    model_name: str
    filename: str


class Hypernetwork(TypedDict):
    name: str
    path: str | None


class FaceRestorer(TypedDict):
    name: str
    cmd_dir: str | None


class RealEsrganModel(TypedDict):
    name: str
    path: str | None
    scale: int | None


class PromptStyle(TypedDict):
    name: str
    prompt: str | None
    negative_prompt: str | None


class EmbeddingItem(TypedDict):
    step: int | None
    sd_checkpoint: str | None
    sd_checkpoint_name: str | None
    shape: int
    vectors: int


class Embeddings(TypedDict):
    loaded: dict[str, EmbeddingItem]
    skipped: dict[str, EmbeddingItem]


class Lora(TypedDict, total=False):
    name: str
    alias: str
    path: str
    metadata: dict[str, Any]


class MemoryRam(TypedDict, total=False):
    free: float
    used: float
    total: float


class MemoryCuda(TypedDict, total=False):
    system: MemoryRam
    active: dict[str, int]
    allocated: dict[str, int]
    reserved: dict[str, int]
    inactive: dict[str, int]
    events: dict[str, int]


class Memory(TypedDict):
    ram: MemoryRam
    cuda: MemoryCuda


class Scripts(TypedDict):
    txt2img: list[str]
    img2img: list[str]


class ScriptArg(TypedDict, total=False):
    label: str | None
    value: Any
    minimum: Any
    maximum: Any
    step: Any
    choices: list[str] | None


class ScriptInfo(TypedDict):
    name: str | None
    is_alwayson: bool | None
    is_img2img: bool | None
    args: list[ScriptArg]


class Extension(TypedDict):
    name: str
    remote: str
    branch: str
    commit_hash: str
    version: str
    commit_date: int
    enabled: bool


# ── training ──────────────────────────────────────────────────────────


class TrainingResponse(TypedDict):
    info: str
