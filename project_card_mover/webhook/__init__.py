"""HTTP surface receiving GitHub webhooks."""
