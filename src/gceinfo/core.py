# Root of every fully qualified Compute Engine resource URL.
# usage: f"{COMPUTE_BASE_URL}projects/{project}/zones/{zone}/instances/{name}"
COMPUTE_BASE_URL = "https://www.googleapis.com/compute/v1/"

# Creation timestamps are rendered with millisecond precision,
# e.g. 2016-01-20T04:39:00.210+00:00
TIMESTAMP_PRECISION = "milliseconds"
