"""User controls and the canvas that turn user actions into simulation inputs."""