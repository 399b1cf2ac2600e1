VERSION_PLACEHOLDER = ":version"

ARCHIVE_SUFFIX = ".tar.gz"
# Installer files shown by the catalog. Windows agents ship as .msi packages.
CATALOG_SUFFIXES = (".tar.gz", ".msi")

DEFAULT_FILENAME_PATTERN = "puppet-enterprise-:version-el-7-x86_64.tar.gz"

APP_DIR_NAME = "pe_stage"
ARCHIVE_DIR_NAME = "pe_builds"
LOG_FILE_NAME = "pe_stage.log.json"

ENV_HOME = "PE_STAGE_HOME"
ENV_ARCHIVE_DIR = "PE_STAGE_ARCHIVE_DIR"
ENV_LOG_LEVEL = "PE_STAGE_LOG_LEVEL"
ENV_VERSION = "PE_STAGE_VERSION"
ENV_FILENAME = "PE_STAGE_FILENAME"
ENV_DOWNLOAD_ROOT = "PE_STAGE_DOWNLOAD_ROOT"
ENV_HTTP_TIMEOUT = "PE_STAGE_HTTP_TIMEOUT"
