"""Shared case tables for googleapi tests.

Each table lists (input..., expected) tuples used with
``pytest.mark.parametrize``.
"""

# (template, values, expected path)
EXPAND_CASES = [
    ('http://www.golang.org/', {}, 'http://www.golang.org/'),
    (
        'http://www.golang.org/{bucket}/delete',
        {'bucket': 'red'},
        'http://www.golang.org/red/delete',
    ),
    (
        'http://www.golang.org/{bucket}/delete',
        {'bucket': 'red/blue'},
        'http://www.golang.org/red%2Fblue/delete',
    ),
    (
        'http://www.golang.org/{bucket}/delete',
        {'bucket': 'red or blue'},
        'http://www.golang.org/red%20or%20blue/delete',
    ),
    (
        'http://www.golang.org/{object}/delete',
        {'bucket': 'red or blue'},
        'http://www.golang.org//delete',
    ),
    (
        'http://www.golang.org/{one}/{two}/{three}/get',
        {'one': 'ONE', 'two': 'TWO', 'three': 'THREE'},
        'http://www.golang.org/ONE/TWO/THREE/get',
    ),
    (
        'http://www.golang.org/{bucket}/get',
        {'bucket': '£100'},
        'http://www.golang.org/%C2%A3100/get',
    ),
    (
        'http://www.golang.org/{bucket}/get',
        {'bucket': '/\\@:,.'},
        'http://www.golang.org/%2F%5C%40%3A%2C./get',
    ),
    (
        'http://www.golang.org/{bucket/get',
        {'bucket': 'red'},
        'http://www.golang.org/%7Bbucket/get',
    ),
    # the double slash is intentional: the value itself starts with '/'
    (
        'http://www.golang.org/{+topic}',
        {'topic': '/topics/myproject/mytopic'},
        'http://www.golang.org//topics/myproject/mytopic',
    ),
]

# (base, rel, expected URL)
RESOLVE_CASES = [
    (
        'http://www.golang.org/',
        'topics/myproject/mytopic',
        'http://www.golang.org/topics/myproject/mytopic',
    ),
    (
        'http://www.golang.org/',
        'topics/{+myproject}/{release}:build:test:deploy',
        'http://www.golang.org/topics/{+myproject}/{release}:build:test:deploy',
    ),
    (
        'https://www.googleapis.com/admin/reports/v1/',
        '/admin/reports_v1/channels/stop',
        'https://www.googleapis.com/admin/reports_v1/channels/stop',
    ),
    (
        'https://www.googleapis.com/admin/directory/v1/',
        'customer/{customerId}/orgunits{/orgUnitPath*}',
        'https://www.googleapis.com/admin/directory/v1/customer/{customerId}/orgunits{/orgUnitPath*}',
    ),
    (
        'https://www.googleapis.com/tagmanager/v2/',
        'accounts',
        'https://www.googleapis.com/tagmanager/v2/accounts',
    ),
    (
        'https://www.googleapis.com/tagmanager/v2/',
        '{+parent}/workspaces',
        'https://www.googleapis.com/tagmanager/v2/{+parent}/workspaces',
    ),
    (
        'https://www.googleapis.com/tagmanager/v2/',
        '{+path}:create_version',
        'https://www.googleapis.com/tagmanager/v2/{+path}:create_version',
    ),
    (
        'https://www.googleapis.com/exampleapi/v2/somemethod',
        '/upload/exampleapi/v2/somemethod',
        'https://www.googleapis.com/upload/exampleapi/v2/somemethod',
    ),
    (
        'https://otherhost.googleapis.com/exampleapi/v2/somemethod',
        '/upload/exampleapi/v2/alternatemethod',
        'https://otherhost.googleapis.com/upload/exampleapi/v2/alternatemethod',
    ),
]

DETAILS_BODY = (
    '{"error": {"code": 400,"message": "The request has errors","status": '
    '"INVALID_ARGUMENT","details": [{"@type": "type.googleapis.com/google.rpc.BadRequest",'
    '"fieldViolations": [{"field": "metadata.name","description": "The revision name '
    'must be prefixed by the name of the enclosing Service or Configuration with a '
    'trailing -"}]}]}}'
)

DETAILS_MESSAGE = """googleapi: Error 400: The request has errors
Details:
[
  {
    "@type": "type.googleapis.com/google.rpc.BadRequest",
    "fieldViolations": [
      {
        "description": "The revision name must be prefixed by the name of the enclosing Service or Configuration with a trailing -",
        "field": "metadata.name"
      }
    ]
  }
]"""

QUOTA_BODY = (
    '{"error":{"code": 429,"message": "Resource has been exhausted (e.g. check quota).",'
    '"status": "RESOURCE_EXHAUSTED"}}'
)

# (status, body, expected message, expected errors as (reason, message), expected str)
ERROR_RESPONSE_CASES = [
    (
        500,
        '{"error":{}}',
        '',
        [],
        'googleapi: got HTTP response code 500 with body: {"error":{}}',
    ),
    (
        404,
        '{"error":{"message":"Error message for StatusNotFound."}}',
        'Error message for StatusNotFound.',
        [],
        'googleapi: Error 404: Error message for StatusNotFound.',
    ),
    (
        400,
        '{"error":"invalid_token","error_description":"Invalid Value"}',
        '',
        [],
        'googleapi: got HTTP response code 400 with body: '
        '{"error":"invalid_token","error_description":"Invalid Value"}',
    ),
    (
        400,
        '{"error":{"errors":[{"domain":"usageLimits","reason":"keyInvalid",'
        '"message":"Bad Request"}],"code":400,"message":"Bad Request"}}',
        'Bad Request',
        [('keyInvalid', 'Bad Request')],
        'googleapi: Error 400: Bad Request, keyInvalid',
    ),
    (400, DETAILS_BODY, 'The request has errors', [], DETAILS_MESSAGE),
    (
        429,
        QUOTA_BODY,
        'Resource has been exhausted (e.g. check quota).',
        [],
        'googleapi: Error 429: Resource has been exhausted (e.g. check quota).',
    ),
    (
        429,
        f'[{QUOTA_BODY}]',
        'Resource has been exhausted (e.g. check quota).',
        [],
        'googleapi: Error 429: Resource has been exhausted (e.g. check quota).',
    ),
]
