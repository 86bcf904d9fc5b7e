"""Version information for vaultviews."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to API or data structures
# MINOR: New features, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.3.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.3.0 - Views in folders
#         - View files may live in subfolders of the views root
#         - Custom views registered per folder suffix or anchored path ("/Work/Inbox")
#         - Optional per-subfolder views derived from things' folders
#         - Others view only excludes things a user custom view currently shows
# 0.2.0 - Configurable vault
#         - YAML config with declarative custom views and custom tags
#         - Renameable built-in views and tags
#         - CLI and HTTP API
# 0.1.0 - Initial release
#         - Tag-hierarchy views, All/Untagged/Others views, Archive tag
