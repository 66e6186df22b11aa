"""Identity domain: who analytics events are attributed to.

IdentityResolver turns a RequestContext into one of the identity shapes.
UniqueTenantIdCache gives self-hosted tenants a globally unique id.
IdentificationService emits identify/group calls to the AnalyticsSink.
Wire them through the container; tests construct them with fakes.
"""
