"""Version metadata."""

# The current version.
VERSION = "0.2.0-dev"

# The default version of protoc from github.com/google/protobuf to use.
#
# See https://github.com/google/protobuf/releases for the latest release.
DEFAULT_PROTOC_VERSION = "3.5.1"

# The git commit and build time of the distribution.
# Both are written here by the release build and are empty otherwise.
GIT_COMMIT = ""
BUILT_TIMESTAMP = ""
