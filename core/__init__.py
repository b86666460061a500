# core: configuration, logging, tiers, the endpoint registry and the request dispatcher
