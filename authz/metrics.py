from prometheus_client import Counter

AUTHORIZATION_DECISIONS = Counter(
    'rbac_authorization_decisions_total',
    'Authorization checks answered, by outcome',
    ['outcome'],
)

AUTHORIZERS_BUILT = Counter(
    'rbac_authorizers_built_total',
    'Number of authorizers constructed from configuration'
)
