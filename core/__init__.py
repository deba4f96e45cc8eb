# core package: configuration, error types and input parsing
