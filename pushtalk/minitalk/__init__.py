"""Text messages between processes carried by SIGUSR1 and SIGUSR2."""