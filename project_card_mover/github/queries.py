"""GraphQL query documents used to inspect project board items.

Identifiers are substituted into fixed templates by literal string
replacement. No escaping is performed, so identifiers must be GraphQL node
IDs as delivered by GitHub.
"""

NODE_ID_PLACEHOLDER = "$nodeId"
ISSUE_ID_PLACEHOLDER = "$issueId"

PROJECT_ITEM_FIELD_VALUES_QUERY_TEMPLATE = """
query {
    node(id: "$nodeId") {
        ... on ProjectV2Item {
            id
            fieldValues(first: 8) {
                nodes {
                    ... on ProjectV2ItemFieldTextValue {
                        text
                        field {
                            ... on ProjectV2FieldCommon {
                                name
                            }
                        }
                    }
                    ... on ProjectV2ItemFieldDateValue {
                        date
                        field {
                            ... on ProjectV2FieldCommon {
                                name
                            }
                        }
                    }
                    ... on ProjectV2ItemFieldSingleSelectValue {
                        name
                        field {
                            ... on ProjectV2FieldCommon {
                                name
                            }
                        }
                    }
                }
            }
            content {
                ... on Issue {
                    id
                    title
                    repository {
                        name
                        owner {
                            login
                        }
                    }
                    assignees(first: 10) {
                        nodes {
                            login
                        }
                    }
                }
                ... on PullRequest {
                    id
                    title
                    assignees(first: 10) {
                        nodes {
                            login
                        }
                    }
                }
            }
        }
    }
}
"""

ISSUE_NUMBER_QUERY_TEMPLATE = """
query {
    node(id: "$issueId") {
        ... on Issue {
            number
        }
    }
}
"""


def prepare_graphql_query(node_id: str) -> str:
    """Build the query fetching a project item's field values and linked content."""
    return PROJECT_ITEM_FIELD_VALUES_QUERY_TEMPLATE.replace(NODE_ID_PLACEHOLDER, node_id)


def prepare_issue_number_query(issue_id: str) -> str:
    """Build the query resolving an issue node ID to its repository-scoped number."""
    return ISSUE_NUMBER_QUERY_TEMPLATE.replace(ISSUE_ID_PLACEHOLDER, issue_id)
