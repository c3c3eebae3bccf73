from .github import (
    GitHubCommentPayload,
    GitHubIssuePayload,
    GitHubUserPayload,
    IssueCommentEventPayload,
    IssuesEventPayload,
    WebhookResponse,
)

__all__ = [
    "GitHubCommentPayload",
    "GitHubIssuePayload",
    "GitHubUserPayload",
    "IssueCommentEventPayload",
    "IssuesEventPayload",
    "WebhookResponse",
]
