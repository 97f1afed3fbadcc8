from pathlib import Path

# Repo-root conventional directories/files (overrideable via converter.yaml / env)
CONFIG_DIR = Path("configs")
CONVERTER_FILE = CONFIG_DIR / "converter.yaml"

KIT_ROOT = Path(".")
OUTPUT_DIR = Path("fa-iconify-package")

# FontAwesome kit layout (relative to kit root)
KIT_METADATA_DIRNAME = "metadata"
KIT_SVGS_DIRNAME = "svgs"
KIT_FONTS_DIRNAME = "otfs"

# Environment overrides
ENV_KIT_ROOT = "FA2ICONIFY_KIT_ROOT"
ENV_OUTPUT_DIR = "FA2ICONIFY_OUTPUT_DIR"
