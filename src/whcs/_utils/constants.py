# headers
HEADER_USER_AGENT = "User-Agent"
HEADER_SDK_ANALYTICS = "X-IBMCloud-SDK-Analytics"
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_AUTHORIZATION = "Authorization"

# content types
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_MULTIPART = "multipart/form-data"
CONTENT_TYPE_OCTET_STREAM = "application/octet-stream"

# environment
ENV_CREDENTIALS_FILE = "IBM_CREDENTIALS_FILE"
DEFAULT_CREDENTIALS_FILE = "ibm-credentials.env"

SDK_NAME = "whcs-python-sdk"
LOGGER_NAME = "whcs"
