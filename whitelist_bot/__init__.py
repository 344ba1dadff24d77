"""Discord slash-command bot that whitelists IPs on a DigitalOcean firewall."""
