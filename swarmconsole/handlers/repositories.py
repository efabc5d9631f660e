from swarmconsole.errors import ValidationError
from swarmconsole.handlers.route_ids import RouteId
from swarmconsole.handlers.table import handles
from swarmconsole.utils.response_helpers import resp_ok


@handles(RouteId.PUBLIC_REPOSITORIES)
def public_repositories(ctx, request):
    query = request.query
    return resp_ok(ctx.api.public_repositories(query.get("query"), query.get("page")))


@handles(RouteId.REPOSITORY_TAGS)
def repository_tags(ctx, request):
    repository = request.query.get("repository")
    if repository is None:
        raise ValidationError("Parameter name missing")
    return resp_ok(ctx.api.repository_tags(request.owner, repository))


@handles(RouteId.REPOSITORY_PORTS)
def repository_ports(ctx, request):
    query = request.query
    repository = query.get("repository")
    tag = query.get("repositoryTag")
    if repository is None or tag is None:
        raise ValidationError("Parameter name or tag missing")
    return resp_ok(ctx.api.repository_ports(request.owner, repository, tag))
